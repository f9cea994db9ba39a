"""Application configuration via environment variables with DATEBOX_ prefix."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .locales.data import LOCALES


class Settings(BaseSettings):
    """Date entry configuration.

    All settings are read from environment variables prefixed with
    ``DATEBOX_`` (e.g. ``DATEBOX_DEFAULT_LOCALE=da``).
    """

    model_config = SettingsConfigDict(env_prefix="DATEBOX_")

    # ── Locale ────────────────────────────────────────────────────────────
    default_locale: str = Field(default="en", min_length=2)

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("default_locale")
    @classmethod
    def _shipped_locale(cls, value: str) -> str:
        if value not in LOCALES:
            raise ValueError(f"unsupported locale: {value} (available: {', '.join(sorted(LOCALES))})")
        return value
