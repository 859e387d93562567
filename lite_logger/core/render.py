"""Template rendering for log lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from lite_logger.core.levels import RESET, LogLevel

COLOR_TOKEN = "@{color}"
TIMESTAMP_TOKEN = "@{timestamp}"
ICON_TOKEN = "@{icon}"
LEVEL_TOKEN = "@{level}"
MESSAGE_TOKEN = "@{message}"

DEFAULT_FORMAT = f"{COLOR_TOKEN}{TIMESTAMP_TOKEN} {ICON_TOKEN} [{LEVEL_TOKEN}] {MESSAGE_TOKEN}"

_TOKEN_RE = re.compile(
    "|".join(
        re.escape(token)
        for token in (COLOR_TOKEN, TIMESTAMP_TOKEN, ICON_TOKEN, LEVEL_TOKEN, MESSAGE_TOKEN)
    )
)


def default_timestamp(moment: datetime) -> str:
    """Format ``moment`` as ``[HH:MM:SS]`` on a 24-hour clock."""
    return f"[{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}]"


@dataclass(frozen=True)
class LogRecord:
    """A single emitted message, before it reaches a sink."""

    level: LogLevel
    raw: str
    rendered: str
    color: str


def render(
    template: str,
    *,
    color: str,
    timestamp: str,
    icon: str,
    label: str,
    message: str,
) -> str:
    """Substitute the known tokens in ``template`` and append the reset code.

    Tokens are replaced in a single pass, so replacement values are never
    scanned for tokens themselves. Unknown ``@{...}`` tokens are left as
    they are.
    """
    values = {
        COLOR_TOKEN: color,
        TIMESTAMP_TOKEN: timestamp,
        ICON_TOKEN: icon,
        LEVEL_TOKEN: label,
        MESSAGE_TOKEN: message,
    }
    return _TOKEN_RE.sub(lambda match: values[match.group(0)], template) + RESET
