import json
from dataclasses import replace
from pathlib import Path

import pytest

from lite_logger.config import LoggerConfig, config_from_dict, load_config
from lite_logger.config.merge import lookup, merge_dicts
from lite_logger.core.levels import DEFAULT_LABELS, LogColor, LogLevel
from lite_logger.core.render import DEFAULT_FORMAT, default_timestamp
from lite_logger.logger import Logger


def test_defaults() -> None:
    cfg = LoggerConfig()

    assert cfg.name == ""
    assert cfg.enabled is True
    assert cfg.min_level is LogLevel.INFO
    assert dict(cfg.colors) == {}
    assert cfg.timestamp is default_timestamp
    assert cfg.format == DEFAULT_FORMAT
    assert cfg.use_print is True
    assert cfg.callback is None


def test_config_is_frozen() -> None:
    cfg = LoggerConfig()

    with pytest.raises(AttributeError):
        cfg.name = "changed"  # type: ignore[misc]


def test_lookup_prefers_override() -> None:
    overrides = {LogLevel.INFO: "INF"}

    assert lookup(overrides, DEFAULT_LABELS, LogLevel.INFO) == "INF"
    assert lookup(overrides, DEFAULT_LABELS, LogLevel.WARNING) == "WARN"


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts({"labels": {"info": "INFO"}, "name": ""}, {"labels": {"debug": "DBG"}})

    assert merged == {"labels": {"info": "INFO", "debug": "DBG"}, "name": ""}


def test_config_from_dict_parses_tables() -> None:
    cfg = config_from_dict(
        {
            "name": "App",
            "min_level": "debug",
            "colors": {"info": "red", "warning": "purple", "unknown": "blue"},
            "icons": {"success": "*", "error": 5},
            "labels": {"WARN": "W!"},
            "format": "@{level} @{message}",
            "use_print": False,
        }
    )

    assert cfg.name == "App"
    assert cfg.min_level is LogLevel.DEBUG
    assert dict(cfg.colors) == {LogLevel.INFO: LogColor.RED}
    assert dict(cfg.icons) == {LogLevel.SUCCESS: "*"}
    assert dict(cfg.labels) == {LogLevel.WARNING: "W!"}
    assert cfg.format == "@{level} @{message}"
    assert cfg.use_print is False


def test_config_from_dict_tolerates_bad_values() -> None:
    cfg = config_from_dict({"enabled": "no", "min_level": "loud", "colors": ["red"], "format": 12})

    assert cfg.enabled is True
    assert cfg.min_level is LogLevel.INFO
    assert dict(cfg.colors) == {}
    assert cfg.format == DEFAULT_FORMAT


def test_load_config_without_path_uses_defaults() -> None:
    assert load_config(None) == LoggerConfig(colors={}, icons={}, labels={})


def test_load_config_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "logger.json"
    path.write_text(json.dumps({"name": "File", "enabled": False, "labels": {"info": "I"}}), encoding="utf-8")

    cfg = load_config(path)

    assert cfg.name == "File"
    assert cfg.enabled is False
    assert dict(cfg.labels) == {LogLevel.INFO: "I"}
    assert cfg.format == DEFAULT_FORMAT


def test_load_config_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "logger.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)


def test_logger_from_config_round_trips() -> None:
    received = []
    cfg = replace(
        config_from_dict({"name": "Cfg", "min_level": "warning", "format": "@{message}"}),
        callback=lambda raw, colored, level: received.append(raw),
    )
    logger = Logger.from_config(cfg)

    logger.info("hidden")
    logger.warning("shown")

    assert received == ["shown"]
    assert logger.name == "Cfg"
    assert logger.config.min_level is LogLevel.WARNING
