"""Document backed by a UTF-8 text file."""

import bisect
import logging
from collections.abc import Sequence
from contextlib import suppress
from pathlib import Path

from .Document import Document
from .EditApplicationError import EditApplicationError
from .NoActiveDocumentError import NoActiveDocumentError
from .Position import Position
from .TextEdit import TextEdit

logger = logging.getLogger(__name__)


class FileDocument(Document):
    """In-memory copy of a text file that writes edits back atomically.

    Line endings are kept as found; only ``\\n`` starts a new line for
    position bookkeeping.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        try:
            with self.path.open(encoding="utf-8", newline="") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            raise NoActiveDocumentError(f"Cannot read document {self.path}: {e}") from e
        self._set_text(text)

    def _set_text(self, text: str) -> None:
        self._text = text
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, ch in enumerate(text) if ch == "\n")

    def get_text(self) -> str:
        return self._text

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self._text)))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return Position(line=line, character=offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        """Inverse of position_at for positions inside the document."""
        if not 0 <= position.line < len(self._line_starts):
            raise EditApplicationError(f"Line {position.line} is outside the document")
        offset = self._line_starts[position.line] + position.character
        if position.character < 0 or offset > len(self._text):
            raise EditApplicationError(f"Position {position.line}:{position.character} is outside the document")
        return offset

    def apply_edits(self, edits: Sequence[TextEdit]) -> bool:
        if not edits:
            return True

        spans = sorted(
            ((self.offset_at(edit.range.start), self.offset_at(edit.range.end), edit.new_text) for edit in edits),
            key=lambda span: span[0],
        )
        pieces: list[str] = []
        cursor = 0
        for start, end, new_text in spans:
            if end < start:
                raise EditApplicationError(f"Edit range {start}-{end} is reversed")
            if start < cursor:
                raise EditApplicationError(f"Edit at offset {start} overlaps a previous edit")
            pieces.append(self._text[cursor:start])
            pieces.append(new_text)
            cursor = end
        pieces.append(self._text[cursor:])
        new_text = "".join(pieces)

        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(new_text)
            temp_path.replace(self.path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise EditApplicationError(f"Failed to write {self.path}: {e}") from e

        logger.debug(f"Applied {len(spans)} edit(s) to {self.path}")
        self._set_text(new_text)
        return True
