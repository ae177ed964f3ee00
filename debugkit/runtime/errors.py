"""Shared exception policy helpers for the debug tools."""

from __future__ import annotations

import logging
from typing import TypeAlias

RecoverableErrors: TypeAlias = tuple[type[BaseException], ...]

# Failures tolerated by profiler exports; the caller only sees a None result.
EXPORT_ERRORS: RecoverableErrors = (
    OSError,
    TypeError,
    ValueError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.DEBUG,
) -> None:
    """Emit observability for a tolerated exception, traceback included."""
    logger.log(level, message, *args, exc_info=True)
