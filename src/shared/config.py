"""Runtime settings for the checkout service.

Loaded from ``CHECKOUT_``-prefixed environment variables (or a ``.env`` file)
via pydantic-settings.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


class CheckoutSettings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = "development"
    log_level: str | None = None
    log_to_file: bool = False
    log_dir: str = "logs"

    model_config = SettingsConfigDict(
        env_prefix="CHECKOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def effective_log_level(self) -> str:
        """Explicit ``log_level`` wins; otherwise derive it from the environment."""
        if self.log_level:
            return self.log_level.upper()
        return _LEVEL_BY_ENVIRONMENT.get(self.environment.lower(), "INFO")

    @property
    def is_production_like(self) -> bool:
        return self.environment.lower() in ("production", "staging")


@lru_cache(maxsize=1)
def get_settings() -> CheckoutSettings:
    """Return the process-wide settings instance."""
    return CheckoutSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
