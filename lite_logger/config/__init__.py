"""Config package facade."""

from lite_logger.config.loader import config_from_dict, load_config
from lite_logger.config.models import LogCallback, LoggerConfig, TimestampFn

__all__ = [
    "LogCallback",
    "LoggerConfig",
    "TimestampFn",
    "config_from_dict",
    "load_config",
]
