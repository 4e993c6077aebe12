"""Abstract text document."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .Position import Position
from .TextEdit import TextEdit


class Document(ABC):
    """Host text buffer the rewrite workflow reads and edits."""

    @abstractmethod
    def get_text(self) -> str:
        """Return the full current text."""

    @abstractmethod
    def position_at(self, offset: int) -> Position:
        """Convert an absolute character offset to a position."""

    @abstractmethod
    def apply_edits(self, edits: Sequence[TextEdit]) -> bool:
        """Apply all edits as one transaction.

        Returns:
            True when every edit was applied, False when the batch was rejected
            and nothing changed.

        Raises:
            EditApplicationError: Implementations may raise instead of returning
                False to carry a reason; the document is left unchanged.
        """
