"""Replace-range edit."""

from dataclasses import dataclass

from .TextRange import TextRange


@dataclass(frozen=True)
class TextEdit:
    range: TextRange
    new_text: str
