"""Configuration for clinic-management."""

from .logging_config import JsonFormatter, LogFormat, LoggingConfig, LogLevel, setup_logging
from .settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    "setup_logging",
    "JsonFormatter",
]
