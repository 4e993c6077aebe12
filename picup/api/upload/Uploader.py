"""Abstract upload primitive."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class Uploader(ABC):
    """Uploads local files and returns one remote URL per file."""

    @abstractmethod
    def upload(self, paths: Sequence[Path | str]) -> list[str] | None:
        """Upload ``paths`` in one batch.

        Returns:
            URLs in input order, or None when the upload failed. Implementations
            report failures by returning None rather than raising.
        """
