"""Notifier that keeps messages for later reporting."""

import logging

from .Notifier import Notifier

logger = logging.getLogger(__name__)


class RecordingNotifier(Notifier):
    """Collects notifications per level and mirrors them to the log.

    Commands use it to move workflow notifications into their output
    ``messages``, ``warnings`` and ``errors`` lists.
    """

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        logger.info(message)
        self.messages.append(message)

    def warning(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)

    def error(self, message: str) -> None:
        logger.error(message)
        self.errors.append(message)
