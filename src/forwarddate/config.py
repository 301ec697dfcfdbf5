from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

WEBHOOK_PATH = "/telegram-webhook"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8080)

    # Telegram
    telegram_bot_token: str | None = Field(default=None)
    telegram_api_base_url: str = Field(default="https://api.telegram.org")
    telegram_timeout_seconds: float = Field(default=10.0, ge=1.0)

    # Webhook registration
    webhook_url: str | None = Field(default=None)
    register_webhook_on_startup: bool = True

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = False

    @field_validator("webhook_url", "telegram_api_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v):
        """Drop trailing slashes so paths can be appended safely."""
        if isinstance(v, str):
            return v.strip().rstrip("/") or None
        return v

    @property
    def public_webhook_url(self) -> str | None:
        """Full callback URL registered with Telegram."""
        if not self.webhook_url:
            return None
        return f"{self.webhook_url}{WEBHOOK_PATH}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
