"""Logging helpers for simplegraph.

Every module obtains its logger through get_logger(__name__) so that all
package loggers share one handler setup and can be reconfigured together.
The initial level comes from the SIMPLEGRAPH_LOG_LEVEL environment variable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO, Union

_LOG_LEVEL_ENV_VAR = "SIMPLEGRAPH_LOG_LEVEL"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}

# Handler settings applied to loggers created later
_stream: Optional[TextIO] = None
_format = _DEFAULT_FORMAT


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


_default_level = _coerce_level(os.getenv(_LOG_LEVEL_ENV_VAR, "WARNING"))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger for a module.

    Names outside the ``simplegraph`` namespace are nested under it, so
    ``get_logger("tools")`` yields ``simplegraph.tools``.

    Args:
        name: Logger name, usually ``__name__``. None gives the package root.

    Returns:
        Cached logger writing to stderr.

    Example:
        >>> from simplegraph.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("growing tree from %s", "A")
    """
    if name is None:
        name = "simplegraph"

    if name != "simplegraph" and not name.startswith("simplegraph."):
        name = f"simplegraph.{name}"

    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(_default_level)
        handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
        handler.setLevel(_default_level)
        handler.setFormatter(logging.Formatter(_format))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[name] = logger
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every simplegraph logger, existing and future.

    Args:
        level: A logging constant or its name ('DEBUG', 'INFO', ...).
    """
    global _default_level
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _default_level = level


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handlers of all simplegraph loggers.

    Call once at application startup to redirect or reformat library output.
    Loggers created afterwards use the same settings.

    Args:
        level: Logging level (default WARNING).
        format_string: Record format; defaults to ``[LEVEL] name: message``.
        stream: Destination stream (default stderr).
    """
    global _default_level, _stream, _format
    level = _coerce_level(level)
    _format = format_string or _DEFAULT_FORMAT
    _stream = stream
    formatter = logging.Formatter(_format)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _default_level = level
