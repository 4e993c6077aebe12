import logging

import pytest

from picup.utils import logger as logger_module


@pytest.fixture
def fresh_logging(monkeypatch):
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    picup_logger = logging.getLogger("picup")
    handlers = list(picup_logger.handlers)
    level = picup_logger.level
    yield picup_logger
    for handler in picup_logger.handlers[len(handlers):]:
        handler.close()
    picup_logger.handlers = handlers
    picup_logger.setLevel(level)


def test_configure_logging_writes_to_home(tmp_path, fresh_logging):
    logger_module.configure_logging(tmp_path / "home", level="WARN")

    assert fresh_logging.level == logging.WARNING
    logging.getLogger("picup.api.image").warning("written")
    for handler in fresh_logging.handlers:
        handler.flush()
    assert "written" in (tmp_path / "home" / "picup.log").read_text(encoding="utf-8")


def test_configure_logging_runs_once(tmp_path, fresh_logging):
    logger_module.configure_logging(tmp_path, level="DEBUG")
    count = len(fresh_logging.handlers)
    logger_module.configure_logging(tmp_path, level="DEBUG")
    assert len(fresh_logging.handlers) == count
