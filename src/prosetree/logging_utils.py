"""Logging setup for the prosetree command line.

Library modules only create loggers under the ``prosetree`` namespace and
never attach handlers. The command line calls :func:`configure_logging` to
route those records to stderr and, optionally, to a file.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "prosetree"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value.

    Unknown names fall back to ``logging.WARNING``.
    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_PLAIN_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the package logger.

    Calling this again replaces the handlers installed by the previous call,
    so repeated CLI invocations in one process do not duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO").
    log_file : str, optional
        Path of a file that receives a copy of every record.
    trace_mode : bool, default False
        Include timestamps and logger names in each record.

    Returns
    -------
    logging.Logger
        The ``prosetree`` logger.

    """
    level = resolve_log_level(log_level)
    formatter = _make_formatter(trace_mode)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level)
    package_logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
