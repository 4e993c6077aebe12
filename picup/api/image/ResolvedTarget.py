"""Resolved target dataclass."""

from dataclasses import dataclass
from pathlib import Path

from .ImageReference import ImageReference
from .TargetKind import TargetKind


@dataclass(frozen=True)
class ResolvedTarget:
    """Reference plus where it points.

    ``path`` is the existing file for LOCAL_RESOLVED, the attempted absolute
    path for LOCAL_MISSING and None for REMOTE.
    """

    reference: ImageReference
    kind: TargetKind
    path: Path | None = None
