"""Assembly – framework log levels and their GELF severity codes."""
from __future__ import annotations

import logging
from enum import IntEnum

from gelf_logging.kernel.errors import UnknownLogLevelError


class LogLevel(IntEnum):
    """Framework log levels, ordered from most to least verbose.

    ``NONE`` is a filter sentinel meaning "log nothing"; it never reaches
    the wire and has no severity code.
    """

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6

    @classmethod
    def from_stdlib(cls, levelno: int) -> "LogLevel":
        """Map a stdlib :mod:`logging` numeric level onto :class:`LogLevel`."""
        if levelno >= logging.CRITICAL:
            return cls.CRITICAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFORMATION
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


# syslog scale: lower is more severe
_GELF_LEVELS: dict[LogLevel, int] = {
    LogLevel.CRITICAL: 2,
    LogLevel.ERROR: 3,
    LogLevel.WARNING: 4,
    LogLevel.INFORMATION: 6,
    LogLevel.DEBUG: 7,
    LogLevel.TRACE: 7,
}


def to_gelf_level(level: LogLevel) -> int:
    """Return the GELF severity code for *level*.

    Raises :class:`UnknownLogLevelError` for ``LogLevel.NONE`` and for
    anything that is not a :class:`LogLevel`.
    """
    if not isinstance(level, LogLevel):
        raise UnknownLogLevelError(level)
    try:
        return _GELF_LEVELS[level]
    except KeyError:
        raise UnknownLogLevelError(level) from None


__all__ = ["LogLevel", "to_gelf_level"]
