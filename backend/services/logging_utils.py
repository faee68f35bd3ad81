"""Logging setup for the backend"""

from __future__ import annotations

import logging


def configure_logging(level: str | int = "INFO") -> None:
    """
    Configure the root logger.

    Accepts a level name ("DEBUG", "info", ...) or a logging constant.
    Unknown names fall back to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
