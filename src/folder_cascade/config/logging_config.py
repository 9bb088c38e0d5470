"""Centralized logging configuration for folder-cascade.

Provides consistent, configurable logging with environment-based control
over verbosity and format.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level.

    Unknown verbosity values fall back to NORMAL.
    """
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "asyncpg",
        "httpx",
        "httpcore",
        "uvicorn.access",
    ]

    @classmethod
    def build_config(cls, verbosity: str = "NORMAL", log_format: str = "simple") -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping for the given verbosity and format."""
        effective_log_level = get_log_level_from_verbosity(verbosity)
        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format.lower())]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables."""
        log_verbosity = os.getenv("LOG_VERBOSITY", "NORMAL")
        log_format = os.getenv("LOG_FORMAT", "simple")

        logging.config.dictConfig(cls.build_config(log_verbosity, log_format))

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: verbosity={log_verbosity}, format={log_format}")


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Call once at application startup.
    """
    LoggingConfig.configure()
