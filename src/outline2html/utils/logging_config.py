"""Logging setup shared by the command line and library modules."""

from __future__ import annotations

import logging

from outline2html.config import OUTLINE2HTML_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command line use.

    ``verbose`` forces DEBUG; otherwise the level comes from
    ``OUTLINE2HTML_LOG_LEVEL``.
    """
    level = logging.DEBUG if verbose else logging.getLevelName(OUTLINE2HTML_LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT, datefmt=_DATE_FORMAT)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
