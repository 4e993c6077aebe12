"""Half-open range between two positions."""

from dataclasses import dataclass

from .Position import Position


@dataclass(frozen=True)
class TextRange:
    start: Position
    end: Position
