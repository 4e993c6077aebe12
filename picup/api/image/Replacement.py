"""Planned text replacement."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Replacement:
    """Replace the ``occurrence``-th match of ``original`` with ``replacement``.

    ``start`` is the offset of ``original`` in the text it was scanned from,
    -1 when unknown.
    """

    original: str
    replacement: str
    occurrence: int = 0
    start: int = -1

    def to_dict(self) -> dict[str, str]:
        return {"original": self.original, "replacement": self.replacement}
