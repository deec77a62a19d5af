"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import sys

from seqkit.config import get_settings

LOGGER_NAME = "seqkit"


def setup_logging() -> None:
    """Configure standard Python logging for the seqkit logger tree.

    Call **exactly once** at program startup; later calls are no-ops.
    The root logger is left to the host program.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return

    # Create a standard formatter with gunicorn-like brackets
    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )

    # Configure stdout handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    level = logging.getLevelName(get_settings().log_level)
    if not isinstance(level, int):
        level = logging.INFO  # Unknown level names fall back to INFO

    # Configure package logger
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    setup_logging._configured = True  # type: ignore[attr-defined]


def reset_logging() -> None:
    """Undo setup_logging (used by tests)."""
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    setup_logging._configured = False  # type: ignore[attr-defined]
