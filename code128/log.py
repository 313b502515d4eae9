"""
Package logger for code128.

Messages go to stderr as ``LEVEL: message`` so that ``--json`` output on
stdout stays machine readable. The level comes from ``CODE128_LOG_LEVEL``
(a level name such as ``DEBUG`` or ``WARNING``); setting ``DEBUG`` to any
value is a shortcut for debug output.
"""

import logging
import os
import sys
from typing import Optional, Union

LOG_FORMAT = "%(levelname)s: %(message)s"

logger = logging.getLogger("code128")


def level_from_env(environ=None) -> int:
    """Resolve the log level from the environment (INFO when unset)."""
    environ = os.environ if environ is None else environ
    name = environ.get("CODE128_LOG_LEVEL", "").strip().upper()
    if name:
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
    if environ.get("DEBUG"):
        return logging.DEBUG
    return logging.INFO


def configure_logging(level: Union[None, int, str] = None, stream=None) -> logging.Logger:
    """
    Attach the stderr handler once and set the package log level.

    Args:
        level: Level number or name; None reads the environment
        stream: Handler stream (default sys.stderr)

    Returns:
        The package logger
    """
    if level is None:
        level = level_from_env()
    elif isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name!r}")

    handler: Optional[logging.Handler] = None
    for existing in logger.handlers:
        if getattr(existing, "_code128", False):
            handler = existing
            break
    if handler is None:
        handler = logging.StreamHandler(stream=stream or sys.stderr)
        handler._code128 = True
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
        logger.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)

    logger.setLevel(level)
    return logger


configure_logging()
