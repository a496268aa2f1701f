"""Pytest configuration and shared fixtures for myoption tests."""

import logging

import pytest

import myoption._logging as logging_module
from myoption import clear_log_hooks


@pytest.fixture
def reset_logging():
    """Undo configure_logging() and drop log hooks after the test."""
    yield
    clear_log_hooks()
    package_logger = logging.getLogger(logging_module.LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    logging_module._handler = None
