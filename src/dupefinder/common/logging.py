"""Logging setup for the command line entry points."""

from __future__ import annotations

import logging
import os

# these log every request at INFO; Steam requests carry the API key in the query string
_CHATTY_LOGGERS = ("httpx", "httpcore", "hishel")


def _level_from_env(default: int) -> int:
    name = os.getenv("DUPEFINDER_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Configure the root logger for CLI output.

    ``level`` defaults to ``DUPEFINDER_LOG_LEVEL`` (or INFO). HTTP client loggers are
    held at WARNING or above regardless. Pass ``force=True`` to replace existing
    handlers, e.g. in tests.
    """

    effective = level if level is not None else _level_from_env(logging.INFO)
    logging.basicConfig(
        level=effective,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(effective, logging.WARNING))
