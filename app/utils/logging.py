"""
Logging setup for the service.

Usage:
    from app.utils.logging import get_logger
    logger = get_logger(__name__)
"""
import logging
import sys
from functools import cache

from app.utils.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_level() -> int:
    return getattr(logging, LOG_LEVEL.upper(), logging.INFO)


def _configure_root_logger() -> None:
    root = logging.getLogger()

    # uvicorn / pytest moga juz miec swoje handlery
    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
