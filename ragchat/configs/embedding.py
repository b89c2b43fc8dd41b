"""
Embedding model configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Embedding service configuration for the vector index
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    provider: Literal["google", "bedrock"] = Field(
        default="google",
        description="Embedding provider: 'google' (Gemini) or 'bedrock' (Titan)",
    )
    model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model identifier for the selected provider",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region (bedrock provider only)",
    )
