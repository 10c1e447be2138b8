"""Logging setup for applications embedding the engine."""

import logging
import sys

from chesslegality.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure logging for the engine.

    Installs a single stdout handler on the root logger (calling this again
    does not add another) and sets the ``chesslegality`` logger level.

    Args:
        level: Level name; defaults to ``Settings.log_level``

    Returns:
        The ``chesslegality`` package logger
    """
    global _handler

    if level is None:
        level = get_settings().log_level
    level = level.upper()

    root_logger = logging.getLogger()
    if _handler is None or _handler not in root_logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(formatter)
        root_logger.addHandler(_handler)
    _handler.setLevel(level)

    package_logger = logging.getLogger("chesslegality")
    package_logger.setLevel(level)
    return package_logger
