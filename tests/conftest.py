"""Pytest configuration and fixtures for typecheck tests."""

import logging
import os
import shutil
import tempfile
from pathlib import Path

import pytest

from dataknobs_typecheck import LOG_CHANNEL, reset_validators


@pytest.fixture(autouse=True)
def reset_registry():
    """Restore the built-in validators around every test."""
    reset_validators()
    yield
    reset_validators()


@pytest.fixture(autouse=True)
def reset_log_level():
    """Keep the validation logger level from leaking between tests."""
    logger = logging.getLogger(LOG_CHANNEL)
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp)


@pytest.fixture
def env_vars(monkeypatch):
    """Helper to set environment variables."""

    def _set_env(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key, str(value))

    return _set_env


@pytest.fixture
def clear_env(monkeypatch):
    """Clear all DATAKNOBS_TYPECHECK_ environment variables."""
    for key in list(os.environ.keys()):
        if key.startswith("DATAKNOBS_TYPECHECK_"):
            monkeypatch.delenv(key)


class FailingHandler(logging.Handler):
    """Handler whose emit always raises."""

    def emit(self, record):
        raise RuntimeError("log sink unavailable")


@pytest.fixture
def failing_log_handler():
    """Attach a raising handler to the validation logger."""
    logger = logging.getLogger(LOG_CHANNEL)
    handler = FailingHandler()
    logger.addHandler(handler)
    yield handler
    logger.removeHandler(handler)
