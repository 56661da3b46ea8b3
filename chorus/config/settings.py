"""chorus configuration via environment / .env file."""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHORUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Logging ---
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # --- Skill identity ---
    SKILL_ID: str | None = None
    VERIFY_SKILL_ID: bool = True

    # --- Response envelope ---
    RESPONSE_VERSION: str = "1.0"
    USER_AGENT: str = "chorus-skills/0.1.0"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("SKILL_ID", mode="before")
    @classmethod
    def _blank_skill_id(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v


settings = Settings()
