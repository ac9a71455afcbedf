"""
Log level enumeration

Levels follow the usual structured-logger ladder, from trace up to panic.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

# ANSI foreground colors
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 36
GREY = 37


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module where they overlap.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    FATAL = 50      # The application cannot continue
    PANIC = 60      # Highest severity

    def __str__(self) -> str:
        """Textual name as shown in rendered headers."""
        return LEVEL_NAMES[self]

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive, "warning" accepted)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(level_str.lower())
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level

    @property
    def color(self) -> int:
        """ANSI color number for this level, 0 when uncolored."""
        return LEVEL_COLORS.get(self, 0)

    def colorize(self, text: str) -> str:
        """Wrap text in this level's ANSI color, if it has one."""
        if not self.color:
            return text
        return f"\x1b[{self.color}m{text}\x1b[0m"


LEVEL_NAMES: Mapping[LogLevel, str] = MappingProxyType({
    LogLevel.TRACE: "trace",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
    LogLevel.PANIC: "panic",
})

LEVEL_FROM_NAME: Mapping[str, LogLevel] = MappingProxyType({
    **{v: k for k, v in LEVEL_NAMES.items()},
    "warn": LogLevel.WARN,
})

# INFO has no color
LEVEL_COLORS: Mapping[LogLevel, int] = MappingProxyType({
    LogLevel.TRACE: GREY,
    LogLevel.DEBUG: BLUE,
    LogLevel.WARN: YELLOW,
    LogLevel.ERROR: RED,
    LogLevel.FATAL: RED,
    LogLevel.PANIC: RED,
})

ELEMENT_COLORS: Mapping[str, int] = MappingProxyType({
    "date": GREY,
    "time": BLUE,
    "caller": GREEN,
})
