# lattice/core/config.py
"""
Central configuration for the SDK.

Environment variables (prefix ``LATTICE_``) override defaults. ``base_url``
wins over ``environment`` when both are set.
"""
from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lattice.constants.environments import ENVIRONMENT_URLS, Environment


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_prefix="LATTICE_", env_file=".env", extra="ignore")

    environment: Environment = Field(
        default=Environment.LOCAL,
        description="Deployment whose base URL is used when base_url is unset",
    )
    base_url: str | None = Field(
        default=None,
        description="Explicit platform base URL, e.g. https://api.loom.digital",
    )
    http_timeout_seconds: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().rstrip("/")
        return value or None

    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url
        return ENVIRONMENT_URLS[self.environment]


settings = Settings()
