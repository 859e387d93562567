"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Mapping, Optional

from lite_logger.core.levels import LogColor, LogLevel
from lite_logger.core.render import DEFAULT_FORMAT, default_timestamp

LogCallback = Callable[[str, str, LogLevel], None]
TimestampFn = Callable[[datetime], str]


@dataclass(frozen=True)
class LoggerConfig:
    """Settings held by a single Logger.

    The ``colors``, ``icons`` and ``labels`` tables are partial overrides;
    levels missing from them use the built-in defaults.
    """

    name: str = ""
    enabled: bool = True
    min_level: LogLevel = LogLevel.INFO
    colors: Mapping[LogLevel, LogColor] = field(default_factory=dict)
    icons: Mapping[LogLevel, str] = field(default_factory=dict)
    labels: Mapping[LogLevel, str] = field(default_factory=dict)
    timestamp: TimestampFn = default_timestamp
    format: str = DEFAULT_FORMAT
    use_print: bool = True
    callback: Optional[LogCallback] = None
