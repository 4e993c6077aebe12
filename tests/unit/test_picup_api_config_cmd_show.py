"""Unit tests for config cmd_show and cmd_version."""

import pytest

from picup.api.config.cmd_show import cmd_show
from picup.api.config.cmd_version import cmd_version
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.config


class TestCmdShow:
    def test_cmd_show_lists_sections(self, picup_home):
        result = run_cmd(cmd_show, "")
        assert result.success
        assert result.output["content"] == {"sections": ["upload", "rewrite", "log"]}

    def test_cmd_show_with_valid_section(self, picup_home):
        result = run_cmd(cmd_show, "upload")
        assert result.success
        assert result.output["section"] == "upload"
        assert result.output["content"]["type"] == "picgo"
        assert result.output["config_path"] == str(picup_home / "config.json")

    def test_cmd_show_with_invalid_section(self, picup_home):
        result = run_cmd(cmd_show, "invalid_section")
        assert not result.success
        assert result.output["errors"] == ["Unknown section: invalid_section"]

    def test_cmd_show_invalid_config_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PICUP_HOME", str(tmp_path))
        (tmp_path / "config.json").write_text("{invalid json")

        result = run_cmd(cmd_show, "upload")
        assert result.success is False
        assert result.output["section"] == "upload"
        assert result.output["errors"]


def test_cmd_version(monkeypatch):
    monkeypatch.setattr("picup.api.config.cmd_version.get_package_version", lambda: "9.9.9")
    result = run_cmd(cmd_version)
    assert result.success
    assert result.output["version"] == "9.9.9"
