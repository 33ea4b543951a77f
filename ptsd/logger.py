"""Logging setup for the framework, with named levels and transform formatting."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

LOGGER_NAME = "ptsd"


class Level(IntEnum):
    """Logging levels, ordered from most to least verbose."""

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


_LEVEL_NAMES = {
    Level.TRACE: "trace",
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
    Level.CRITICAL: "critical",
}


def _level_for(value: int) -> Level:
    """Return the highest defined level not above ``value``."""
    candidates = [level for level in Level if level <= value]
    return max(candidates) if candidates else Level.TRACE


class _Formatter(logging.Formatter):
    """Renders records as ``name [level] message``."""

    def format(self, record: logging.LogRecord) -> str:
        name = _LEVEL_NAMES[_level_for(record.levelno)]
        text = f"{record.name} [{name}] {record.getMessage()}"
        if record.exc_info:
            text += "\n" + self.formatException(record.exc_info)
        return text


class _ConsoleHandler(logging.StreamHandler):
    """Console handler installed by :func:`init`."""


def _logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def init() -> None:
    """Install the console handler once and apply the default level."""
    from .config import DEFAULT_LOG_LEVEL

    logger = _logger()
    if not any(isinstance(h, _ConsoleHandler) for h in logger.handlers):
        handler = _ConsoleHandler()
        handler.setFormatter(_Formatter())
        logger.addHandler(handler)
    set_level(DEFAULT_LOG_LEVEL)


def set_level(level: Level) -> None:
    """Set the level below which records are dropped."""
    _logger().setLevel(int(Level(level)))


def get_level() -> Level:
    """Return the level currently in effect."""
    return _level_for(_logger().getEffectiveLevel())


def _number(value: float) -> str:
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _vec2(vector: Any) -> str:
    x, y = (float(component) for component in vector)
    return f"vec2({x:.6f}, {y:.6f})"


def format_transform(transform: Any) -> str:
    """Describe a transform's translation, rotation and scale."""
    return (
        f"T: {_vec2(transform.translation)} "
        f"R: {_number(transform.rotation)} rad "
        f"S: {_vec2(transform.scale)}"
    )