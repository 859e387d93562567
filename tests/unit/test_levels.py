import pytest

from lite_logger.core.levels import (
    DEFAULT_COLORS,
    DEFAULT_ICONS,
    DEFAULT_LABELS,
    LogColor,
    LogLevel,
    parse_color,
    parse_level,
)


def test_level_order() -> None:
    assert [level.ordinal for level in LogLevel] == [0, 1, 2, 3, 4, 5]
    assert list(LogLevel) == [
        LogLevel.ERROR,
        LogLevel.WARNING,
        LogLevel.SUCCESS,
        LogLevel.INFO,
        LogLevel.STEP,
        LogLevel.DEBUG,
    ]


def test_passes_uses_priority_order() -> None:
    for level in LogLevel:
        for threshold in LogLevel:
            assert level.passes(threshold) == (level.ordinal <= threshold.ordinal)
    assert LogLevel.ERROR.passes(LogLevel.WARNING)
    assert not LogLevel.DEBUG.passes(LogLevel.INFO)


def test_color_codes() -> None:
    assert LogColor.BLUE.code == "\x1b[34m"
    assert LogColor.YELLOW.code == "\x1b[33m"
    assert LogColor.RED.code == "\x1b[31m"
    assert LogColor.GRAY.code == "\x1b[90m"
    assert LogColor.GREEN.code == "\x1b[32m"
    assert LogColor.CYAN.code == "\x1b[36m"


def test_default_tables_cover_every_level() -> None:
    for table in (DEFAULT_COLORS, DEFAULT_ICONS, DEFAULT_LABELS):
        assert set(table) == set(LogLevel)
    assert DEFAULT_LABELS[LogLevel.ERROR] == "ERRR"
    assert DEFAULT_LABELS[LogLevel.DEBUG] == "DBUG"
    assert DEFAULT_ICONS[LogLevel.INFO] == "💡"
    assert DEFAULT_COLORS[LogLevel.STEP] is LogColor.CYAN


def test_default_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_LABELS[LogLevel.INFO] = "NOPE"  # type: ignore[index]
    assert DEFAULT_LABELS[LogLevel.INFO] == "INFO"


def test_parse_level_accepts_names_and_labels() -> None:
    assert parse_level("warning") is LogLevel.WARNING
    assert parse_level(" Debug ") is LogLevel.DEBUG
    assert parse_level("WARN") is LogLevel.WARNING
    assert parse_level("errr") is LogLevel.ERROR
    assert parse_level(LogLevel.STEP) is LogLevel.STEP


def test_parse_level_falls_back_to_default() -> None:
    assert parse_level("verbose") is LogLevel.INFO
    assert parse_level(3) is LogLevel.INFO
    assert parse_level("verbose", default=None) is None


def test_parse_color() -> None:
    assert parse_color("cyan") is LogColor.CYAN
    assert parse_color("Grey") is LogColor.GRAY
    assert parse_color("magenta") is None
    assert parse_color(None) is None
