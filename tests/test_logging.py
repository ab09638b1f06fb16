# -*- coding: utf-8 -*-
"""Tests for the logging setup."""

import logging

import pytest

from layerinfo import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    """Fixture restoring the package logger after each test."""
    logger = logging.getLogger("layerinfo")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_setup_logging_is_idempotent():
    """Calling setup twice does not duplicate handlers."""
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.DEBUG)
    assert logger.name == "layerinfo"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_log_file(tmp_path):
    log_file = tmp_path / "layerinfo.log"
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    logging.getLogger("layerinfo.stats").info("hello")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "layerinfo.stats - INFO - hello" in log_file.read_text(encoding="utf-8")
