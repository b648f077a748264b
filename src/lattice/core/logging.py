# lattice/core/logging.py
"""
Logging setup for applications embedding the SDK.

Every module logs through ``logging.getLogger(__name__)``; nothing is
configured at import time. Call :func:`configure_logging` (or pass
``log_level`` to :func:`lattice.configure`) to get JSON records on stdout.
"""
from __future__ import annotations

import logging
import sys
from typing import TextIO

from pythonjsonlogger.json import JsonFormatter

SDK_LOGGER_NAME = "lattice"


def configure_logging(
    level: str = "INFO",
    *,
    stream: TextIO | None = None,
    sdk_only: bool = True,
) -> logging.Logger:
    """Install a single JSON handler.

    Args:
        level: Log level name.
        stream: Destination, stdout by default.
        sdk_only: Configure only the ``lattice`` logger tree and stop
            propagation; when False the root logger is configured instead.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(SDK_LOGGER_NAME if sdk_only else None)
    logger.setLevel(level.upper())

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )

    # Avoid duplicate handlers when configured twice
    logger.handlers = [handler]
    if sdk_only:
        logger.propagate = False
    return logger
