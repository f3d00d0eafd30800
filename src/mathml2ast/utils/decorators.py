#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/utils/decorators.py
"""Timing helpers used by the parser."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time at DEBUG level.

    Nothing is measured when the logger is not enabled for DEBUG.

    Parameters
    ----------
    logger : logging.Logger
        Logger that receives the timing message
    operation : str
        Description of the timed block (e.g., "Parsing MathML document")

    Yields
    ------
    None
        Control flow to the code block being timed

    Examples
    --------
        >>> with debug_timer(logger, "Parsing MathML document"):
        ...     root = translator.translate(tree)
        ... # Logs: "Parsing MathML document completed in 0.01s" at DEBUG level

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
