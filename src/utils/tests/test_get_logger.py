"""
Tests for the cached logger factory.
"""

import logging

import pytest

from utils import get_logger as get_logger_module
from utils.get_logger import LocalTimeFormatter, get_logger

pytestmark = pytest.mark.unit


def test_logger_is_cached():
    assert get_logger("podsearch.test.cached") is get_logger("podsearch.test.cached")


def test_console_handler_uses_local_time_format():
    logger = get_logger("podsearch.test.console")

    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LocalTimeFormatter)


def test_file_handler_writes_under_log_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(get_logger_module, "LOG_DIR", str(tmp_path))

    logger = get_logger("podsearch.test.file", level=logging.INFO, filename="feeds.log")
    logger.info("ingested 3 episodes")
    for handler in logger.handlers:
        handler.flush()

    assert "ingested 3 episodes" in (tmp_path / "feeds.log").read_text()


def test_set_level_updates_cached_loggers():
    logger = get_logger("podsearch.test.level")
    original = logger.level
    try:
        get_logger_module.set_level(logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)
    finally:
        get_logger_module.set_level(original)
