"""Tests for settings and logging configuration."""

import pytest
from pydantic import ValidationError

from folder_cascade.config.logging_config import LoggingConfig, get_log_level_from_verbosity
from folder_cascade.config.settings import CascadeSettings


class TestCascadeSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CASCADE_DATABASE_URL", raising=False)
        settings = CascadeSettings(_env_file=None)

        assert settings.settle_delay_seconds == 0.25
        assert settings.uses_database is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CASCADE_SETTLE_DELAY_SECONDS", "1.5")
        monkeypatch.setenv("CASCADE_DATABASE_URL", "postgresql://localhost/cascade")

        settings = CascadeSettings(_env_file=None)

        assert settings.settle_delay_seconds == 1.5
        assert settings.uses_database is True

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            CascadeSettings(_env_file=None, settle_delay_seconds=-1)


class TestLoggingConfig:
    """Test logging configuration building."""

    @pytest.mark.parametrize("verbosity, level", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("DEBUG", "DEBUG"),
        ("nonsense", "WARNING"),
    ])
    def test_verbosity_levels(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_error_only_modules(self):
        config = LoggingConfig.build_config("VERBOSE", "json")

        assert config["root"]["level"] == "INFO"
        assert config["loggers"]["asyncpg"]["level"] == "ERROR"
        assert config["formatters"]["default"]["format"].startswith('{"time"')
