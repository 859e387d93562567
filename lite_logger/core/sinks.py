"""Console sinks that receive rendered log records."""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO

from colorama import just_fix_windows_console

from lite_logger.core.levels import LogLevel
from lite_logger.core.render import LogRecord

DEFAULT_LOGGER_NAME = "lite_logger"

_STDLIB_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.SUCCESS: logging.INFO,
    LogLevel.INFO: logging.INFO,
    LogLevel.STEP: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class ConsoleSink(Protocol):
    """Destination for records that passed both gates."""

    def write(self, record: LogRecord, name: str) -> None:
        ...


def name_prefix(record: LogRecord, name: str) -> str:
    """Return the ``<color>[name]: `` prefix, or an empty string for no name."""
    if not name:
        return ""
    return f"{record.color}[{name}]: "


class PlainConsoleSink:
    """Print records to a text stream, ``sys.stdout`` unless one is given."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        just_fix_windows_console()

    def write(self, record: LogRecord, name: str) -> None:
        # Resolved per call so redirected stdout is honoured.
        stream = self._stream or sys.stdout
        print(name_prefix(record, name) + record.rendered, file=stream)


class StructuredConsoleSink:
    """Forward records to the standard library ``logging`` tree.

    The severity ordinal and logger name travel as ``extra`` metadata.
    When the target logger has no handlers anywhere in its hierarchy, the
    plain sink is used instead. Handler levels, filters and disabled
    loggers can still drop a record that is forwarded.
    """

    def __init__(self, fallback: ConsoleSink | None = None) -> None:
        self._fallback = fallback if fallback is not None else PlainConsoleSink()

    def write(self, record: LogRecord, name: str) -> None:
        target = logging.getLogger(name or DEFAULT_LOGGER_NAME)
        if not target.hasHandlers():
            self._fallback.write(record, name)
            return
        # The threshold gate already ran, so skip the stdlib logger level check.
        entry = target.makeRecord(
            target.name,
            _STDLIB_LEVELS[record.level],
            __name__,
            0,
            record.rendered,
            None,
            None,
            extra={"severity": record.level.ordinal, "logger_name": name},
        )
        target.handle(entry)


def build_sink(use_print: bool = True, stream: TextIO | None = None) -> ConsoleSink:
    """Select the plain or structured console sink."""
    plain = PlainConsoleSink(stream)
    if use_print:
        return plain
    return StructuredConsoleSink(fallback=plain)
