"""Client settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

__version__ = "0.1.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DAILY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Daily REST API ─────────────────────────────────────────
    api_key: str = ""
    base_url: str = "https://api.daily.co/v1/"
    timeout: float = 5.0  # seconds, per request

    # ── Informational ──────────────────────────────────────────
    user_agent: str = f"daily-api-python/{__version__}"


settings = Settings()
