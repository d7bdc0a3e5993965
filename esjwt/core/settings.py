"""Minting settings loaded from environment variables."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DURATION_MONTHS_DEFAULT = 5
LOG_LEVEL_DEFAULT = "WARNING"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class MintSettings(BaseSettings):
    """Token lifetime and logging settings."""

    model_config = SettingsConfigDict(env_prefix="ESJWT_")

    duration_months: int = Field(default=DURATION_MONTHS_DEFAULT, ge=0)
    log_level: LogLevel = LOG_LEVEL_DEFAULT

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value
