"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from picup.api.config.PicupConfig import PicupConfig


def pytest_configure(config):
    for marker in ("unit", "image", "upload", "config", "document", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid picup configuration dict for testing."""
    return {
        "upload": {
            "type": "picgo",
            "url": "http://127.0.0.1:36677/upload",
            "command": [],
            "timeout_secs": 5.0,
        },
        "rewrite": {
            "use_upload_version_folder": False,
            "upload_workers": 1,
            "messages": {},
        },
        "log": {"level": "DEBUG"},
    }


def minimal_picup_config() -> PicupConfig:
    """Build a PicupConfig from the minimal config dict."""
    return PicupConfig(**minimal_config_dict())


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def picup_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up PICUP_HOME with a minimal config file.

    Returns:
        Path to the picup home directory
    """
    home = tmp_path / ".picup"
    home.mkdir()
    monkeypatch.setenv("PICUP_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict), encoding="utf-8")
    return home


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
