"""Configuration for folder-cascade."""

from .settings import CascadeSettings, get_settings
from .logging_config import LoggingConfig, LogFormat, LogVerbosity, setup_logging

__all__ = [
    "CascadeSettings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
    "LogVerbosity",
    "setup_logging",
]
