"""Notification sinks for user-facing messages."""

from .Notifier import Notifier
from .RecordingNotifier import RecordingNotifier

__all__ = ["Notifier", "RecordingNotifier"]
