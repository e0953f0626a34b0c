"""
Configuration des logs
======================

Loguru sinks for the application: a console sink and an optional
rotating file sink.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from loguru import logger

__all__ = ["configure_logging", "LOG_FORMAT"]

LOG_FORMAT = "{time:HH:mm:ss} | {level} | {name}:{line} | {message}"


def configure_logging(level: str | None = None, log_file: str | Path | None = None) -> list[int]:
    """
    Replace loguru's default sink with the application sinks.

    Args:
        level: Minimum level; defaults to ``SNAPNAV_LOG_LEVEL`` or ``INFO``.
        log_file: Optional path of a rotating log file.

    Returns:
        list[int]: Identifiers of the installed handlers.
    """
    level = (level or os.environ.get("SNAPNAV_LOG_LEVEL", "INFO")).upper()

    logger.remove()
    handler_ids = [logger.add(sys.stderr, level=level, format=LOG_FORMAT, colorize=True)]

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                path,
                level=level,
                format=LOG_FORMAT,
                rotation="1 MB",
                retention=3,
                encoding="utf-8",
            )
        )

    logger.debug(f"Logs configurés (niveau {level})")
    return handler_ids
