"""Logging utilities for the search lab.

One cached, namespaced logger per module so handlers are never duplicated
when a module is imported twice (Flask's reloader does exactly that).
"""

import logging
import sys
from typing import Dict, Optional, Union

ROOT = "searchlab"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_default_level = logging.WARNING
_loggers: Dict[str, logging.Logger] = {}


def is_level_name(name: str) -> bool:
    """True for a registered level name such as "INFO" (case-insensitive)."""
    return isinstance(logging.getLevelName(name.upper()), int)


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        # unregistered names map to "Level X" strings, not ints
        value = logging.getLevelName(level.upper())
        return value if isinstance(value, int) else logging.WARNING
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create the logger for `name` (typically `__name__`).

    Every logger lives under the ``searchlab.`` namespace and writes to
    stderr with a ``[LEVEL] name: message`` line.

    Example:
        >>> from logger import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("engine ready")
    """
    if name is None:
        name = ROOT
    logger_name = name if name == ROOT or name.startswith(ROOT + ".") else f"{ROOT}.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_default_level)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_default_level)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every searchlab logger, existing and future."""
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
    stream=None,
) -> None:
    """Replace the handlers of every searchlab logger.

    Call once at application start-up (main.py does it from Settings).
    """
    global _default_level
    level = _coerce_level(level)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _default_level = level
