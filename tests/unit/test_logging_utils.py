#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Tests for the command-line logging setup."""

import logging

import pytest

from prosetree.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for level name resolution."""

    def test_names(self) -> None:
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level("ERROR") == logging.ERROR

    def test_int_passthrough(self) -> None:
        assert resolve_log_level(15) == 15

    def test_unknown_name(self) -> None:
        assert resolve_log_level("chatty") == logging.WARNING


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for handler installation on the package logger."""

    def test_console_handler(self, package_logger) -> None:
        logger = configure_logging("INFO")
        assert logger is package_logger
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_repeated_calls_replace_handlers(self, package_logger) -> None:
        configure_logging("INFO")
        configure_logging("DEBUG")
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG

    def test_log_file(self, package_logger, tmp_path) -> None:
        log_path = tmp_path / "prosetree.log"
        configure_logging(logging.INFO, log_file=str(log_path))
        logging.getLogger("prosetree.parsers.html").info("converted")
        for handler in package_logger.handlers:
            handler.flush()
        assert "INFO: converted" in log_path.read_text(encoding="utf-8")

    def test_trace_format(self, package_logger, tmp_path) -> None:
        log_path = tmp_path / "trace.log"
        configure_logging("DEBUG", log_file=str(log_path), trace_mode=True)
        logging.getLogger("prosetree.api").debug("step")
        for handler in package_logger.handlers:
            handler.flush()
        assert "[DEBUG] [prosetree.api] step" in log_path.read_text(encoding="utf-8")
