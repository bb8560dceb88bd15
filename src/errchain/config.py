from __future__ import annotations

import sys

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .redact import RedactMode, set_redact_mode


class Settings(BaseSettings):
    redact_log: RedactMode = Field(
        default=RedactMode.DISABLED, validation_alias="ERRCHAIN_REDACT_LOG"
    )
    log_level: str = Field(default="INFO", validation_alias="ERRCHAIN_LOG_LEVEL")

    @field_validator("redact_log", mode="before")
    @classmethod
    def _parse_redact_log(cls, v: RedactMode | str) -> RedactMode | str:
        if isinstance(v, str) and not isinstance(v, RedactMode):
            return v.strip().upper() or RedactMode.DISABLED
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def configure(settings: Settings | None = None) -> Settings:
    """Apply *settings* (read from the environment if omitted)."""
    settings = settings or Settings()
    set_redact_mode(settings.redact_log)
    configure_logging(settings.log_level)
    return settings
