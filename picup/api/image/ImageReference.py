"""Image reference dataclass."""

from dataclasses import dataclass

from .SyntaxKind import SyntaxKind


@dataclass(frozen=True)
class ImageReference:
    """One image reference found in a text.

    ``fragment`` is the URL or path portion; it sits at ``fragment_offset``
    inside ``raw``, and ``raw`` starts at ``start`` in the scanned text.
    """

    raw: str
    fragment: str
    kind: SyntaxKind
    start: int = 0
    fragment_offset: int = 0

    def with_fragment(self, new_fragment: str) -> str:
        """Return ``raw`` with the fragment replaced and everything else kept."""
        end = self.fragment_offset + len(self.fragment)
        return self.raw[: self.fragment_offset] + new_fragment + self.raw[end:]
