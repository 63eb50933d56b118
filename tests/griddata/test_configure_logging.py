# tests/griddata/test_configure_logging.py
import logging

import pytest

from griddata.utils.configure_logging import LogWithTqdm, configure_logger


@pytest.fixture
def restore_logging():
    """Puts the root handlers and the touched logger levels back after the test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    names = ["griddata.builder", "bs4"]
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, value in levels.items():
        logging.getLogger(name).setLevel(value)


def test_configure_logger_levels(restore_logging):
    configure_logger(
        "INFO",
        module_specific_levels={"griddata.builder": "DEBUG"},
        silenced_loggers={"bs4": "ERROR"},
    )
    root = logging.getLogger()

    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], LogWithTqdm)
    assert logging.getLogger("griddata.builder").level == logging.DEBUG
    assert logging.getLogger("bs4").level == logging.ERROR


def test_configure_logger_unknown_level_falls_back(restore_logging):
    configure_logger("LOUD", silenced_loggers={"bs4": "NOPE"})
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("bs4").level == logging.CRITICAL
