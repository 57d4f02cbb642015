"""Test the centralized logging functionality."""

import logging
from io import StringIO

import pytest

from spgraph import logging as sp_logging
from spgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    parse_level,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    reset_logging()
    setup_root_logger(level=logging.INFO)


def test_centralized_logging():
    """Child loggers honour the root level changes."""
    set_global_log_level(logging.INFO)
    logger = get_logger("spgraph.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("Test info message")
    assert "Test info message" in log_capture.getvalue()

    logger.debug("Test debug message")
    assert "Test debug message" not in log_capture.getvalue()

    enable_debug_logging()
    logger.debug("Test debug message after enable")
    assert "Test debug message after enable" in log_capture.getvalue()

    disable_debug_logging()
    assert logging.getLogger("spgraph").level == logging.INFO
    logger.removeHandler(handler)


def test_logger_naming():
    logger = get_logger("spgraph.graph.test")
    assert logger.name == "spgraph.graph.test"
    assert logger.level == logging.NOTSET


def test_multiple_loggers_inherit_root_level():
    logger1 = get_logger("spgraph.module1")
    logger2 = get_logger("spgraph.module2")
    assert logger1 is not logger2

    set_global_log_level("warning")
    assert logging.getLogger("spgraph").level == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING


def test_setup_is_idempotent():
    root = logging.getLogger("spgraph")
    before = list(root.handlers)
    setup_root_logger(level=logging.DEBUG)
    assert root.handlers == before


def test_reset_and_custom_handler():
    reset_logging()
    root = logging.getLogger("spgraph")
    assert root.handlers == []

    capture = StringIO()
    setup_root_logger(
        level=logging.DEBUG,
        format_string="%(levelname)s:%(message)s",
        handler=logging.StreamHandler(capture),
    )
    get_logger("spgraph.custom").debug("hello")
    assert "DEBUG:hello" in capture.getvalue()


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(sp_logging.LOG_LEVEL_ENV, "error")
    reset_logging()
    setup_root_logger()
    assert logging.getLogger("spgraph").level == logging.ERROR


def test_parse_level():
    assert parse_level(logging.DEBUG) == logging.DEBUG
    assert parse_level("info") == logging.INFO
    assert parse_level(" Warning ") == logging.WARNING
    with pytest.raises(ValueError, match="Unknown log level"):
        parse_level("loud")
