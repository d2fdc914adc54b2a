"""Centralized logging configuration for clinic-management.

Verbosity and format are controlled through environment variables so the
same build can run quietly in production and verbosely in development.
"""

import json
import logging
import logging.config
import os
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
}


class JsonFormatter(logging.Formatter):
    """Formatter emitting one JSON object per record."""
    
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "time": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
    ]
    
    # Modules kept at warning unless debugging
    QUIET_MODULES = [
        "uvicorn.access",
    ]
    
    @classmethod
    def build_config(
        cls,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        enable_sql_logging: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Build a dictConfig mapping, falling back to environment variables."""
        level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
        if level not in LogLevel.__members__:
            level = LogLevel.INFO.value
        
        fmt = (log_format or os.getenv("LOG_FORMAT", "simple")).lower()
        try:
            log_format_option = LogFormat(fmt)
        except ValueError:
            log_format_option = LogFormat.SIMPLE
        
        if log_format_option == LogFormat.JSON:
            formatter: Dict[str, Any] = {"()": JsonFormatter}
        else:
            formatter = {
                "format": FORMAT_STRINGS[log_format_option],
                "datefmt": "%Y-%m-%d %H:%M:%S",
            }
        
        if enable_sql_logging is None:
            enable_sql_logging = os.getenv("ENABLE_SQL_LOGGING", "false").lower() == "true"
        
        config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": formatter,
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": level,
                "handlers": ["console"],
            },
            "loggers": {},
        }
        
        for module in cls.QUIET_MODULES:
            config["loggers"][module] = {
                "level": "WARNING" if level != "DEBUG" else "DEBUG",
                "handlers": ["console"],
                "propagate": False,
            }
        
        for module in cls.ERROR_ONLY_MODULES:
            config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }
        
        if not enable_sql_logging:
            config["loggers"]["asyncpg"] = {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            }
        
        return config
    
    @classmethod
    def configure(
        cls,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
    ) -> None:
        """Configure logging based on arguments or environment variables."""
        config = cls.build_config(log_level=log_level, log_format=log_format)
        logging.config.dictConfig(config)
        
        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={config['root']['level']}")


def setup_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Setup logging configuration.
    
    This is the main entry point for configuring logging in the application.
    It should be called once at application startup.
    """
    LoggingConfig.configure(log_level=log_level, log_format=log_format)
