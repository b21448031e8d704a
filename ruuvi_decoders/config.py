"""Application configuration via pydantic-settings."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "RUUVI_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # Logging
    LOG_LEVEL: str = "INFO"
    SERVICE_NAME: str = "ruuvi-decoders"

    # Gateway: drop advertisements weaker than this (dBm)
    MIN_RSSI: int | None = Field(default=None, ge=-127, le=20)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if not isinstance(getattr(logging, v.upper(), None), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got '{v}'")
        return v.upper()
