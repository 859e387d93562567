"""Lightweight colored console logger for developer output."""

from lite_logger.config import LogCallback, LoggerConfig, config_from_dict, load_config
from lite_logger.core.levels import (
    DEFAULT_COLORS,
    DEFAULT_ICONS,
    DEFAULT_LABELS,
    RESET,
    LogColor,
    LogLevel,
)
from lite_logger.core.message import LazyMessage, LiteralMessage
from lite_logger.core.render import DEFAULT_FORMAT, LogRecord, default_timestamp
from lite_logger.core.sinks import ConsoleSink, PlainConsoleSink, StructuredConsoleSink
from lite_logger.logger import Logger, get_logger

__all__ = [
    "DEFAULT_COLORS",
    "DEFAULT_FORMAT",
    "DEFAULT_ICONS",
    "DEFAULT_LABELS",
    "RESET",
    "ConsoleSink",
    "LazyMessage",
    "LiteralMessage",
    "LogCallback",
    "LogColor",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LoggerConfig",
    "PlainConsoleSink",
    "StructuredConsoleSink",
    "config_from_dict",
    "default_timestamp",
    "get_logger",
    "load_config",
]
