"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Sections are built when Settings is instantiated, so a bad environment
value surfaces from get_settings() rather than at import time.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field, ValidationError

from ragchat.configs.base import BaseSettings
from ragchat.configs.chat import ChatSettings
from ragchat.configs.embedding import EmbeddingSettings
from ragchat.configs.llm import LLMSettings
from ragchat.configs.vector_store import VectorStoreSettings
from ragchat.core.exceptions import InvalidConfig


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    llm: LLMSettings = Field(default_factory=LLMSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables (and .env) are loaded once on first call.

    Returns:
        Settings: Application settings instance

    Raises:
        InvalidConfig: An environment value failed validation

    Usage:
        from ragchat.configs import get_settings
        settings = get_settings()
    """
    try:
        return Settings()
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or err['type']}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidConfig(
            message=f"Invalid configuration ({e.title})",
            details={"errors": errors},
        ) from e
