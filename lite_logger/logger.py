"""Developer-facing console logger with templated, colored output."""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType
from typing import Mapping, TextIO

from lite_logger.config.merge import lookup
from lite_logger.config.models import LogCallback, LoggerConfig, TimestampFn
from lite_logger.core.levels import (
    DEFAULT_COLORS,
    DEFAULT_ICONS,
    DEFAULT_LABELS,
    LogColor,
    LogLevel,
)
from lite_logger.core.message import MessageLike, as_message
from lite_logger.core.render import DEFAULT_FORMAT, LogRecord, default_timestamp, render
from lite_logger.core.sinks import ConsoleSink, build_sink


class Logger:
    """Gate, render and dispatch log messages.

    Messages may be strings or zero-argument callables; a callable is only
    invoked once the message passes both the enabled flag and the level
    threshold. Rendered text goes to ``callback`` when one is configured,
    otherwise to the console sink.
    """

    def __init__(
        self,
        *,
        name: str = "",
        enabled: bool = True,
        min_level: LogLevel = LogLevel.INFO,
        callback: LogCallback | None = None,
        colors: Mapping[LogLevel, LogColor] | None = None,
        icons: Mapping[LogLevel, str] | None = None,
        labels: Mapping[LogLevel, str] | None = None,
        timestamp: TimestampFn = default_timestamp,
        format: str = DEFAULT_FORMAT,
        use_print: bool = True,
        sink: ConsoleSink | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._config = LoggerConfig(
            name=name,
            enabled=enabled,
            min_level=min_level,
            colors=MappingProxyType(dict(colors or {})),
            icons=MappingProxyType(dict(icons or {})),
            labels=MappingProxyType(dict(labels or {})),
            timestamp=timestamp,
            format=format,
            use_print=use_print,
            callback=callback,
        )
        self._sink = sink if sink is not None else build_sink(use_print, stream)

    @classmethod
    def from_config(
        cls,
        cfg: LoggerConfig,
        *,
        sink: ConsoleSink | None = None,
        stream: TextIO | None = None,
    ) -> "Logger":
        """Build a Logger from a LoggerConfig."""
        return cls(
            name=cfg.name,
            enabled=cfg.enabled,
            min_level=cfg.min_level,
            callback=cfg.callback,
            colors=cfg.colors,
            icons=cfg.icons,
            labels=cfg.labels,
            timestamp=cfg.timestamp,
            format=cfg.format,
            use_print=cfg.use_print,
            sink=sink,
            stream=stream,
        )

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Return True when a message at ``level`` would be emitted."""
        return self._config.enabled and level.passes(self._config.min_level)

    def emit(self, message: MessageLike, level: LogLevel = LogLevel.INFO) -> None:
        """Emit ``message`` at ``level`` if the logger is enabled and the level passes."""
        if not self.is_enabled_for(level):
            return
        cfg = self._config
        raw = as_message(message).resolve()
        color = lookup(cfg.colors, DEFAULT_COLORS, level).code
        rendered = render(
            cfg.format,
            color=color,
            timestamp=cfg.timestamp(datetime.now()),
            icon=lookup(cfg.icons, DEFAULT_ICONS, level),
            label=lookup(cfg.labels, DEFAULT_LABELS, level),
            message=raw,
        )
        record = LogRecord(level=level, raw=raw, rendered=rendered, color=color)
        self._dispatch(record)

    def _dispatch(self, record: LogRecord) -> None:
        callback = self._config.callback
        if callback is not None:
            callback(record.raw, record.rendered, record.level)
            return
        self._sink.write(record, self._config.name)

    def error(self, message: MessageLike) -> None:
        self.emit(message, LogLevel.ERROR)

    def warning(self, message: MessageLike) -> None:
        self.emit(message, LogLevel.WARNING)

    def success(self, message: MessageLike) -> None:
        self.emit(message, LogLevel.SUCCESS)

    def info(self, message: MessageLike) -> None:
        self.emit(message, LogLevel.INFO)

    def step(self, message: MessageLike) -> None:
        self.emit(message, LogLevel.STEP)

    def debug(self, message: MessageLike) -> None:
        self.emit(message, LogLevel.DEBUG)


_LOGGER = Logger()


def get_logger() -> Logger:
    """Return the shared default logger instance."""
    return _LOGGER
