"""Tests for configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from proration.config import Environment, LogLevel, Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_defaults(self) -> None:
        """Test default settings."""
        settings = Settings(_env_file=None)
        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == LogLevel.INFO
        assert settings.debug is False
        assert settings.service_name == "prorated-billing"
        assert not settings.is_production

    def test_environment_from_env(self) -> None:
        """Test environment variables are case-insensitive."""
        with patch.dict(os.environ, {"ENVIRONMENT": "production", "log_level": "DEBUG"}):
            settings = Settings(_env_file=None)
            assert settings.is_production
            assert settings.log_level == LogLevel.DEBUG

    def test_invalid_environment(self) -> None:
        with patch.dict(os.environ, {"ENVIRONMENT": "qa"}):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_empty_service_name_rejected(self) -> None:
        with patch.dict(os.environ, {"SERVICE_NAME": ""}):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestGetSettings:
    """Tests for get_settings."""

    def test_cached(self) -> None:
        """Test the same instance is returned on repeated calls."""
        assert get_settings() is get_settings()
