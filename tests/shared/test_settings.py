"""Tests for checkout settings."""

from shared.config import CheckoutSettings, get_settings, reset_settings


class TestCheckoutSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CHECKOUT_ENVIRONMENT", raising=False)
        monkeypatch.delenv("CHECKOUT_LOG_LEVEL", raising=False)
        settings = CheckoutSettings(_env_file=None)
        assert settings.environment == "development"
        assert settings.log_to_file is False
        assert settings.log_dir == "logs"
        assert settings.effective_log_level == "DEBUG"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("CHECKOUT_ENVIRONMENT", "production")
        monkeypatch.setenv("CHECKOUT_LOG_TO_FILE", "true")
        settings = CheckoutSettings(_env_file=None)
        assert settings.environment == "production"
        assert settings.log_to_file is True
        assert settings.is_production_like is True

    def test_level_derived_from_environment(self):
        assert CheckoutSettings(_env_file=None, environment="staging").effective_log_level == "INFO"
        assert CheckoutSettings(_env_file=None, environment="test").effective_log_level == "WARNING"
        assert CheckoutSettings(_env_file=None, environment="qa").effective_log_level == "INFO"

    def test_explicit_level_wins(self):
        settings = CheckoutSettings(_env_file=None, environment="production", log_level="debug")
        assert settings.effective_log_level == "DEBUG"


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_reset_rereads_environment(self, monkeypatch):
        monkeypatch.setenv("CHECKOUT_ENVIRONMENT", "staging")
        reset_settings()
        assert get_settings().environment == "staging"
