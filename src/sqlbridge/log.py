"""Logging setup for the command-line shell."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Send ``sqlbridge`` log records to stderr at *level*.

    Library code never calls this; it only attaches a ``NullHandler`` to the package logger. Calling it again replaces
    the handler installed by the previous call.

    Args:
        level: A logging level number or name such as ``"DEBUG"``.

    Raises:
        ValueError: If *level* is an unknown level name.
    """
    global _handler

    if isinstance(level, str):
        level = level.upper()
    package_logger = logging.getLogger("sqlbridge")
    package_logger.setLevel(level)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(_handler)
