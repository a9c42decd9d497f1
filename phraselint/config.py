import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "development"
    LOG_LEVEL: str = "WARNING"

    # CLI defaults
    ENTRY: Optional[str] = None
    REF: str = "en.json"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PHRASELINT_", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

settings = Settings()
