"""Unit tests for configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from hosted_checkout.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_settings_loads_from_environment(self) -> None:
        """Test that Settings loads values from environment variables."""
        env_vars = {
            "APP_NAME": "test-app",
            "APP_ENV": "testing",
            "DEBUG": "true",
            "HOST": "127.0.0.1",
            "PORT": "9000",
            "STRIPE_API_KEY": "sk_test_from_env",
            "STRIPE_WEBHOOK_SECRET": "whsec_from_env",
            "STRIPE_WEBHOOK_TOLERANCE": "120",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings()

            assert settings.app_name == "test-app"
            assert settings.app_env == "testing"
            assert settings.debug is True
            assert settings.host == "127.0.0.1"
            assert settings.port == 9000
            assert settings.stripe_api_key == "sk_test_from_env"
            assert settings.stripe_webhook_secret == "whsec_from_env"
            assert settings.stripe_webhook_tolerance == 120

    def test_missing_webhook_secret_is_not_an_error(self) -> None:
        """Test that the webhook secret is optional."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.stripe_webhook_secret is None
            assert settings.stripe_api_key == ""
            assert settings.stripe_webhook_tolerance == 300

    def test_negative_tolerance_is_rejected(self) -> None:
        """Test that a negative signature tolerance fails validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, stripe_webhook_tolerance=-1)


class TestGetSettings:
    """Tests for get_settings function."""

    def test_get_settings_returns_cached_instance(self) -> None:
        """Test that get_settings returns the same cached instance."""
        get_settings.cache_clear()

        first = get_settings()
        second = get_settings()

        assert first is second

        get_settings.cache_clear()
