"""Severity levels, terminal colors and the built-in presentation tables."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class LogLevel(Enum):
    """Log severity in priority order.

    ERROR has the highest priority (ordinal 0) and DEBUG the lowest
    (ordinal 5). A message passes a threshold when its ordinal is less
    than or equal to the threshold's ordinal.
    """

    ERROR = 0
    WARNING = 1
    SUCCESS = 2
    INFO = 3
    STEP = 4
    DEBUG = 5

    @property
    def ordinal(self) -> int:
        return self.value

    def passes(self, threshold: "LogLevel") -> bool:
        """Return True when this level is at or above ``threshold`` priority."""
        return self.value <= threshold.value


class LogColor(Enum):
    """Terminal colors as ANSI escape sequences."""

    BLUE = "\x1b[34m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    GRAY = "\x1b[90m"
    GREEN = "\x1b[32m"
    CYAN = "\x1b[36m"

    @property
    def code(self) -> str:
        return self.value


RESET = "\x1b[0m"

DEFAULT_COLORS: Mapping[LogLevel, LogColor] = MappingProxyType(
    {
        LogLevel.INFO: LogColor.BLUE,
        LogLevel.WARNING: LogColor.YELLOW,
        LogLevel.ERROR: LogColor.RED,
        LogLevel.DEBUG: LogColor.GRAY,
        LogLevel.SUCCESS: LogColor.GREEN,
        LogLevel.STEP: LogColor.CYAN,
    }
)

DEFAULT_ICONS: Mapping[LogLevel, str] = MappingProxyType(
    {
        LogLevel.INFO: "💡",
        LogLevel.WARNING: "⚠️",
        LogLevel.ERROR: "❌",
        LogLevel.DEBUG: "🧠",
        LogLevel.SUCCESS: "✅",
        LogLevel.STEP: "🔄",
    }
)

# Fixed width keeps columns aligned.
DEFAULT_LABELS: Mapping[LogLevel, str] = MappingProxyType(
    {
        LogLevel.ERROR: "ERRR",
        LogLevel.WARNING: "WARN",
        LogLevel.SUCCESS: "SUCC",
        LogLevel.INFO: "INFO",
        LogLevel.STEP: "STEP",
        LogLevel.DEBUG: "DBUG",
    }
)


_LEVEL_ALIASES = {
    "ERR": LogLevel.ERROR,
    "ERRR": LogLevel.ERROR,
    "WARN": LogLevel.WARNING,
    "SUCC": LogLevel.SUCCESS,
    "DBUG": LogLevel.DEBUG,
}


def parse_level(value: Any, default: LogLevel | None = LogLevel.INFO) -> LogLevel | None:
    """Resolve a level from an enum member, a name or a label.

    Unknown values fall back to ``default``.
    """
    if isinstance(value, LogLevel):
        return value
    if not isinstance(value, str):
        return default
    key = value.strip().upper()
    if key in LogLevel.__members__:
        return LogLevel[key]
    return _LEVEL_ALIASES.get(key, default)


def parse_color(value: Any) -> LogColor | None:
    """Resolve a color from an enum member or a name such as ``"cyan"``."""
    if isinstance(value, LogColor):
        return value
    if not isinstance(value, str):
        return None
    key = value.strip().upper()
    if key == "GREY":
        key = "GRAY"
    return LogColor.__members__.get(key)
