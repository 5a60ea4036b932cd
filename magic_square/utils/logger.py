"""Logging setup for the magic square package."""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER = "magic_square"


def configure_logging(level: int = logging.INFO) -> None:
    """Install a single stream handler on the package logger.

    Library modules only emit records; the CLI is the one place that calls
    this, mapping ``--verbose`` to :data:`logging.DEBUG`.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger namespaced under ``magic_square``."""

    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
