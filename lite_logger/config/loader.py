"""Configuration loading and normalization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from lite_logger.config.merge import merge_dicts
from lite_logger.config.models import LoggerConfig
from lite_logger.core.levels import LogColor, LogLevel, parse_color, parse_level
from lite_logger.core.render import DEFAULT_FORMAT

DEFAULT_RAW: Dict[str, Any] = {
    "name": "",
    "enabled": True,
    "min_level": "info",
    "colors": {},
    "icons": {},
    "labels": {},
    "format": DEFAULT_FORMAT,
    "use_print": True,
}


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_str(value: Any, default: str) -> str:
    if isinstance(value, str):
        return value
    return default


def _level_keys(raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        return {}
    return {str(k): v for k, v in raw.items()}


def _colors_from_raw(raw: Any) -> Dict[LogLevel, LogColor]:
    colors: Dict[LogLevel, LogColor] = {}
    for key, value in _level_keys(raw).items():
        level = parse_level(key, default=None)
        color = parse_color(value)
        if level is None or color is None:
            continue
        colors[level] = color
    return colors


def _strings_from_raw(raw: Any) -> Dict[LogLevel, str]:
    table: Dict[LogLevel, str] = {}
    for key, value in _level_keys(raw).items():
        level = parse_level(key, default=None)
        if level is None or not isinstance(value, str):
            continue
        table[level] = value
    return table


def config_from_dict(raw: Dict[str, Any]) -> LoggerConfig:
    """Build a LoggerConfig instance from a raw dictionary.

    Args:
        raw: Raw config dictionary, typically parsed JSON.

    Returns:
        Normalized LoggerConfig instance.
    """
    return LoggerConfig(
        name=_as_str(raw.get("name"), ""),
        enabled=_as_bool(raw.get("enabled"), True),
        min_level=parse_level(raw.get("min_level"), LogLevel.INFO),
        colors=_colors_from_raw(raw.get("colors")),
        icons=_strings_from_raw(raw.get("icons")),
        labels=_strings_from_raw(raw.get("labels")),
        format=_as_str(raw.get("format"), DEFAULT_FORMAT),
        use_print=_as_bool(raw.get("use_print"), True),
    )


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a JSON object: {path}")
    return data


def load_config(path: Path | None) -> LoggerConfig:
    """Load config data into a LoggerConfig instance.

    Args:
        path: Optional path to a JSON config file containing overrides.

    Returns:
        Parsed LoggerConfig instance.
    """
    raw = dict(DEFAULT_RAW)
    if path is not None:
        raw = merge_dicts(raw, _load_json(path))
    return config_from_dict(raw)
