"""
Shared settings for the Bible portal service.

Every settings class (database, AI gateway, lexicon, chat stream) reads the
same `.env` file and carries the process-wide fields below: the environment
name reported at startup, the reload switch used by `bible_portal.main` and
the root level passed to `configure_logging`.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Process-wide settings inherited by each config module."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name logged at startup (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Run uvicorn with auto-reload",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for configure_logging",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level
