"""
Unit tests for script logging configuration.
"""

import json
import logging

import pytest

from squadrate.logging_setup import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter():
    record = logging.LogRecord("squadrate.test", logging.INFO, __file__, 1, "resolved %s", ("x",), None)
    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "squadrate.test"
    assert payload["message"] == "resolved x"


def test_configure_logging(restore_root_logger):
    configure_logging(level="debug", fmt="json")

    assert restore_root_logger.level == logging.DEBUG
    assert isinstance(restore_root_logger.handlers[-1].formatter, JsonFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configure_logging_console(restore_root_logger):
    configure_logging(level="WARNING", fmt="console")

    assert restore_root_logger.level == logging.WARNING
    assert not isinstance(restore_root_logger.handlers[-1].formatter, JsonFormatter)
