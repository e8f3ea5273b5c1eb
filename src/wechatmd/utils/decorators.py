#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/utils/decorators.py
"""Timing helpers for pipeline stages."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the duration of the enclosed block at DEBUG level.

    Nothing is measured when the logger is not enabled for DEBUG.

    Examples
    --------
        >>> with debug_timer(logger, "Lowering"):
        ...     root = lower_document(document)
        ... # Logs: "Lowering completed in 1.52ms"

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start_time = time.perf_counter()
    yield
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(f"{operation} completed in {elapsed_ms:.2f}ms")
