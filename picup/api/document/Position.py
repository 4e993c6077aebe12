"""Zero-based line/character position in a document."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    line: int
    character: int
