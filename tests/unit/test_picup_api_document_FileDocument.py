"""Unit tests for FileDocument."""

from pathlib import Path

import pytest

from picup.api.document.EditApplicationError import EditApplicationError
from picup.api.document.FileDocument import FileDocument
from picup.api.document.NoActiveDocumentError import NoActiveDocumentError
from picup.api.document.Position import Position
from picup.api.document.TextEdit import TextEdit
from picup.api.document.TextRange import TextRange

pytestmark = pytest.mark.document


def _edit(doc: FileDocument, start: int, end: int, text: str) -> TextEdit:
    return TextEdit(TextRange(doc.position_at(start), doc.position_at(end)), text)


@pytest.fixture
def note(tmp_path: Path) -> Path:
    path = tmp_path / "note.md"
    path.write_bytes(b"line one\r\nline two\nend")
    return path


def test_reads_text_with_line_endings_kept(note):
    doc = FileDocument(note)
    assert doc.get_text() == "line one\r\nline two\nend"


def test_position_at(note):
    doc = FileDocument(note)
    assert doc.position_at(0) == Position(0, 0)
    assert doc.position_at(10) == Position(1, 0)
    assert doc.position_at(19) == Position(2, 0)
    assert doc.position_at(999) == Position(2, 3)


def test_offset_at_round_trips_and_rejects_out_of_range(note):
    doc = FileDocument(note)
    assert doc.offset_at(Position(1, 5)) == 15
    with pytest.raises(EditApplicationError):
        doc.offset_at(Position(7, 0))
    with pytest.raises(EditApplicationError):
        doc.offset_at(Position(2, 10))


def test_apply_edits_writes_file(note):
    doc = FileDocument(note)
    assert doc.apply_edits([_edit(doc, 19, 22, "END"), _edit(doc, 0, 4, "LINE")])

    assert note.read_bytes() == b"LINE one\r\nline two\nEND"
    assert doc.get_text() == "LINE one\r\nline two\nEND"
    assert not note.with_suffix(".md.tmp").exists()


def test_empty_edit_list_leaves_file_alone(note):
    before = note.stat().st_mtime_ns
    assert FileDocument(note).apply_edits([]) is True
    assert note.stat().st_mtime_ns == before


def test_overlapping_edits_are_rejected(note):
    doc = FileDocument(note)
    with pytest.raises(EditApplicationError, match="overlaps"):
        doc.apply_edits([_edit(doc, 0, 6, "x"), _edit(doc, 4, 8, "y")])
    assert note.read_bytes() == b"line one\r\nline two\nend"


def test_reversed_range_is_rejected(note):
    doc = FileDocument(note)
    with pytest.raises(EditApplicationError, match="reversed"):
        doc.apply_edits([_edit(doc, 5, 2, "x")])


def test_write_failure_cleans_up(note, monkeypatch):
    doc = FileDocument(note)

    def fail_replace(self, target):
        raise OSError("read-only")

    monkeypatch.setattr(Path, "replace", fail_replace)
    with pytest.raises(EditApplicationError, match="read-only"):
        doc.apply_edits([_edit(doc, 0, 4, "LINE")])

    assert not note.with_suffix(".md.tmp").exists()
    assert doc.get_text() == "line one\r\nline two\nend"


def test_missing_file(tmp_path):
    with pytest.raises(NoActiveDocumentError):
        FileDocument(tmp_path / "absent.md")


def test_binary_file(tmp_path):
    path = tmp_path / "blob.md"
    path.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(NoActiveDocumentError):
        FileDocument(path)
