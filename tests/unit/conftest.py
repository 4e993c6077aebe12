"""Unit test fixtures.

Configuration helpers are in tests/conftest.py. This file holds fakes for
the rewrite workflow collaborators.
"""

from collections.abc import Sequence
from pathlib import Path

import pytest

from picup.api.document.Document import Document
from picup.api.document.EditApplicationError import EditApplicationError
from picup.api.document.Position import Position
from picup.api.document.TextEdit import TextEdit
from picup.api.notify.RecordingNotifier import RecordingNotifier
from picup.api.upload.Uploader import Uploader
from tests.conftest import minimal_config_dict, minimal_picup_config, run_cmd

__all__ = [
    "FakeUploader",
    "MemoryDocument",
    "minimal_config_dict",
    "minimal_picup_config",
    "run_cmd",
]


class FakeUploader(Uploader):
    """Uploader that records calls and serves deterministic URLs.

    Paths whose file name is in ``failing`` get None back.
    """

    def __init__(self, failing: set[str] | None = None):
        self.calls: list[list[str]] = []
        self.failing = failing or set()

    def upload(self, paths: Sequence[Path | str]) -> list[str] | None:
        files = [str(p) for p in paths]
        self.calls.append(files)
        if any(Path(f).name in self.failing for f in files):
            return None
        return [f"https://img.example.com/{Path(f).name}" for f in files]

    @property
    def uploaded_paths(self) -> list[str]:
        return [p for call in self.calls for p in call]


class MemoryDocument(Document):
    """Document held in memory.

    ``reject`` makes apply_edits return False; ``error`` makes it raise.
    """

    def __init__(self, text: str, reject: bool = False, error: str | None = None):
        self.text = text
        self.reject = reject
        self.error = error
        self.batches: list[list[TextEdit]] = []

    def get_text(self) -> str:
        return self.text

    def position_at(self, offset: int) -> Position:
        before = self.text[:offset]
        return Position(line=before.count("\n"), character=len(before) - (before.rfind("\n") + 1))

    def _offset(self, position: Position) -> int:
        lines = self.text.split("\n")
        return sum(len(line) + 1 for line in lines[: position.line]) + position.character

    def apply_edits(self, edits: Sequence[TextEdit]) -> bool:
        self.batches.append(list(edits))
        if self.error:
            raise EditApplicationError(self.error)
        if self.reject:
            return False
        spans = sorted((self._offset(e.range.start), self._offset(e.range.end), e.new_text) for e in edits)
        for start, end, new_text in reversed(spans):
            self.text = self.text[:start] + new_text + self.text[end:]
        return True


@pytest.fixture
def uploader() -> FakeUploader:
    return FakeUploader()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def patch_uploader(monkeypatch, picup_home) -> FakeUploader:
    """Make commands use a FakeUploader instead of the configured backend."""
    fake = FakeUploader()
    monkeypatch.setattr("picup.api.image.cmd_rewrite.get_uploader", lambda _cfg: fake)
    monkeypatch.setattr("picup.api.image.cmd_upload.get_uploader", lambda _cfg: fake)
    return fake
