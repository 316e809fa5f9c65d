# carrental/core/logger.py
"""
Logging setup shared by the whole backend.
Everything goes to the console; uvicorn's own loggers propagate to root.
"""

import logging

from carrental.core.config import settings

_configured = False


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module that logs."""
    _configure_root_logger()
    return logging.getLogger(name)
