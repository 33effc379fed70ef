# sitemap_crawler/logger.py
"""Logging setup for the ``SitemapCrawler`` logger tree.

Result lines (``<status>\\t<url>``) are written to stdout by the crawler
itself, so log records go to stderr and, optionally, to a rotating file.
Modules log through children such as ``SitemapCrawler.processor``; they
inherit whatever :func:`configure` installs here.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

LOGGER_NAME: Final[str] = "SitemapCrawler"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3


def _formatted(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _drop_handlers(lg: logging.Logger) -> None:
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()


def configure(
    *,
    level: Union[int, str] = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Install stderr (and optional file) handlers on the crawler logger.

    With ``replace_handlers`` the previous handlers are closed first, so the
    CLI can call this once per invocation without stacking output.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    if replace_handlers:
        _drop_handlers(lg)

    lg.addHandler(_formatted(logging.StreamHandler(sys.stderr), log_format))
    if log_file is not None:
        rotating = RotatingFileHandler(
            str(log_file), maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
        )
        lg.addHandler(_formatted(rotating, log_format))

    lg.propagate = False
    return lg


def init_logging(
    level: Union[int, str] = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """CLI entry: reset handlers and apply the requested level."""
    return configure(level=level, log_file=log_file, log_format=log_format)


logger: logging.Logger = configure()

__all__ = ["logger", "configure", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
