"""CLI entrypoint for emitting log lines from the shell."""

from __future__ import annotations

from dataclasses import replace

from lite_logger.cli import DemoOptions, EmitOptions, parse_cli
from lite_logger.config import LoggerConfig, load_config
from lite_logger.core.levels import LogLevel, parse_level
from lite_logger.logger import Logger, get_logger

log = get_logger()

DEMO_MESSAGES = [
    (LogLevel.INFO, "Application started"),
    (LogLevel.STEP, "Loading configuration..."),
    (LogLevel.DEBUG, "Resolved 6 severity levels"),
    (LogLevel.SUCCESS, "Configuration loaded"),
    (LogLevel.WARNING, "Low disk space"),
    (LogLevel.ERROR, "Unable to access database"),
]


def _apply_overrides(cfg: LoggerConfig, options: EmitOptions | DemoOptions) -> LoggerConfig:
    if options.name is not None:
        cfg = replace(cfg, name=options.name)
    if options.template is not None:
        cfg = replace(cfg, format=options.template)
    if options.structured:
        cfg = replace(cfg, use_print=False)
    if isinstance(options, EmitOptions):
        if options.min_level is not None:
            cfg = replace(cfg, min_level=parse_level(options.min_level))
        if options.disabled:
            cfg = replace(cfg, enabled=False)
    else:
        cfg = replace(cfg, min_level=LogLevel.DEBUG)
    return cfg


def run_demo(logger: Logger) -> None:
    """Emit one message at every severity."""
    for level, message in DEMO_MESSAGES:
        logger.emit(message, level)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Returns:
        Process exit code.
    """
    command, options = parse_cli(argv)

    config_path = options.config_path
    if config_path is not None:
        if not config_path.exists():
            log.error(f"Config path not found: {config_path}")
            return 2
        if config_path.is_dir():
            log.error(f"Config path must be a file: {config_path}")
            return 2

    try:
        cfg = load_config(config_path)
    except (OSError, ValueError) as exc:
        log.error(f"Invalid config file {config_path}: {exc}")
        return 2

    logger = Logger.from_config(_apply_overrides(cfg, options))
    if command == "demo":
        run_demo(logger)
        return 0
    logger.emit(options.message, parse_level(options.level))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
