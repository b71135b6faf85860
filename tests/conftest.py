"""Pytest configuration and shared fixtures for the prosetree test suite."""

import json
import logging
from pathlib import Path

import pytest

from prosetree.logging_utils import PACKAGE_LOGGER_NAME

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the directory holding test fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def load_fixture_document():
    """Return a loader for plain-hash JSON fixtures by name."""

    def _load(name: str) -> dict:
        path = FIXTURES_DIR / "documents" / f"{name}.json"
        return json.loads(path.read_text(encoding="utf-8"))

    return _load


@pytest.fixture(autouse=True)
def package_logger():
    """Restore the ``prosetree`` logger after tests that configure logging."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved_handlers, saved_level, saved_propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate
