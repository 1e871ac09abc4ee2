"""
Logging configuration for the service.

``configure_logging`` applies the logging fields of ``Settings``: level,
record layout and an optional log file.  Handlers are attached to the
root logger at most once per process, so a server that already set up
logging (uvicorn, pytest) keeps its own handlers.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings


def build_handlers(settings: Settings) -> List[logging.Handler]:
    """Create the console handler and, if ``LOG_FILE`` is set, a file handler."""
    formatter = logging.Formatter(fmt=settings.log_format, datefmt=settings.log_date_format)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(settings: Settings) -> bool:
    """Configure the root logger from ``settings``.

    Returns ``True`` when handlers were installed and ``False`` when the
    root logger already had handlers and was left alone.  Unknown level
    names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return False
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    for handler in build_handlers(settings):
        root.addHandler(handler)
    return True
