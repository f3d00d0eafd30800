#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/logging_utils.py
"""Logging setup for the mathml2ast command-line interface."""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "mathml2ast"

_CONSOLE_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(funcName)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Return the numeric level for ``log_level``, falling back to WARNING for unknown names."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure logging for a command-line run.

    Console output goes to stderr so that JSON written to stdout stays
    machine-readable. Calling this again replaces the previous handlers.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        Path of a file that receives a copy of the log output. If the file
        cannot be opened a warning is logged and console logging continues.
    trace_mode : bool, default False
        Include timestamps, logger and function names in every record.

    Returns
    -------
    logging.Logger
        The ``mathml2ast`` package logger.

    """
    level = resolve_log_level(log_level)
    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_CONSOLE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger
