"""Command-line parsing helpers."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

_LEVEL_CHOICES = ["error", "warning", "success", "info", "step", "debug"]


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to a JSON logger config file")
    parser.add_argument("--name", help="Logger name shown as a [name]: prefix")
    parser.add_argument("--format", dest="template", help="Format template, e.g. '[@{level}] @{message}'")
    parser.add_argument(
        "--structured",
        action="store_true",
        help="Route output through the logging module instead of print",
    )


@dataclass
class EmitOptions:
    """Parsed CLI options for the emit command."""

    message: str
    level: str
    min_level: str | None
    config_path: Path | None
    name: str | None
    template: str | None
    structured: bool
    disabled: bool


@dataclass
class DemoOptions:
    """Parsed CLI options for the demo command."""

    config_path: Path | None
    name: str | None
    template: str | None
    structured: bool


def _resolve_config_path(raw: str | None) -> Path | None:
    if raw:
        return Path(raw).expanduser().resolve()
    return None


def _parse_emit_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="lite-logger emit", description="Emit a single log message.")
    _add_common_args(parser)
    parser.add_argument("message", help="Message text")
    parser.add_argument("--level", default="info", choices=_LEVEL_CHOICES, help="Message severity")
    parser.add_argument("--min-level", choices=_LEVEL_CHOICES, help="Lowest severity that is emitted")
    parser.add_argument("--disabled", action="store_true", help="Disable the logger")
    return parser.parse_args(argv)


def _parse_demo_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="lite-logger demo", description="Emit one message per severity.")
    _add_common_args(parser)
    return parser.parse_args(argv)


def get_emit_options(argv: list[str]) -> EmitOptions:
    """Build an EmitOptions instance from CLI arguments.

    Args:
        argv: Argument list without the command name.

    Returns:
        EmitOptions with normalized paths and flags.
    """
    args = _parse_emit_args(argv)
    return EmitOptions(
        message=args.message,
        level=args.level,
        min_level=args.min_level,
        config_path=_resolve_config_path(args.config),
        name=args.name,
        template=args.template,
        structured=bool(args.structured),
        disabled=bool(args.disabled),
    )


def get_demo_options(argv: list[str]) -> DemoOptions:
    args = _parse_demo_args(argv)
    return DemoOptions(
        config_path=_resolve_config_path(args.config),
        name=args.name,
        template=args.template,
        structured=bool(args.structured),
    )


def parse_cli(argv: list[str] | None = None) -> tuple[str, EmitOptions | DemoOptions]:
    """Parse command-line arguments and return the command name and options."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "demo":
        return "demo", get_demo_options(args[1:])
    if args and args[0] == "emit":
        return "emit", get_emit_options(args[1:])
    return "emit", get_emit_options(args)
