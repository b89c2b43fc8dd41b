"""
Shared settings base.

Every configuration section reads the process environment and an optional
.env file; LOG_LEVEL is the only unprefixed, top-level setting.

Dependencies: pydantic, pydantic_settings
System role: Common base for the aggregated Settings class
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Top-level settings read from LOG_LEVEL and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root logging level for the chat shell (overridden by --log-level)",
    )
