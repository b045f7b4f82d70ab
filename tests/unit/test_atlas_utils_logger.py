"""Unit tests for atlas.utils.logger."""

import logging

import pytest

from atlas.utils import logger as logger_module


@pytest.fixture
def fresh_logging(monkeypatch):
    root = logging.getLogger("atlas")
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_configure_logging_to_file(fresh_logging, tmp_path):
    log_file = tmp_path / "logs" / "atlas.log"
    logger_module.configure_logging("INFO", log_file)

    logging.getLogger("atlas.test").info("hello")
    for handler in fresh_logging.handlers:
        handler.flush()

    assert fresh_logging.level == logging.INFO
    assert "atlas.test - INFO - hello" in log_file.read_text()


def test_configure_logging_only_once(fresh_logging):
    logger_module.configure_logging("DEBUG")
    count = len(fresh_logging.handlers)
    logger_module.configure_logging("ERROR")
    assert len(fresh_logging.handlers) == count
    assert fresh_logging.level == logging.DEBUG
