"""Classification of a resolved image reference."""

from enum import Enum


class TargetKind(str, Enum):
    REMOTE = "remote"
    LOCAL_RESOLVED = "local"
    LOCAL_MISSING = "missing"
