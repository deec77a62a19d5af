import logging

import pytest

from seqkit.config import LOG_LEVEL_ENV, reset_settings
from seqkit.observability.logging import LOGGER_NAME, reset_logging, setup_logging


@pytest.fixture(autouse=True)
def clean_logging():
    reset_settings()
    reset_logging()
    yield
    reset_logging()
    reset_settings()


def test_setup_logging_configures_package_logger(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    setup_logging()
    logger = logging.getLogger(LOGGER_NAME)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    setup_logging()
    setup_logging()
    assert len(logging.getLogger(LOGGER_NAME).handlers) == 1


def test_setup_logging_leaves_root_alone():
    root_handlers = list(logging.getLogger().handlers)
    setup_logging()
    assert logging.getLogger().handlers == root_handlers


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    setup_logging()
    assert logging.getLogger(LOGGER_NAME).level == logging.INFO


def test_format(monkeypatch, capsys):
    monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
    setup_logging()
    logging.getLogger(f"{LOGGER_NAME}.services").info("hello")
    out = capsys.readouterr().out
    assert "[INFO] seqkit.services - hello" in out
