from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPCONV_",
        extra="ignore",
    )

    verbose: bool = False
