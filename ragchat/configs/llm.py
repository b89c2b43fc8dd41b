"""
Language model configuration settings.

Selects the chat model backend used by the intent classifier and the
answer generator. Temperature defaults to 0 so classification is repeatable.

Dependencies: pydantic, pydantic_settings
System role: Language model configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Chat model configuration (Google Gemini or Amazon Bedrock)."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    provider: Literal["google", "bedrock"] = Field(
        default="google",
        description="Chat model provider: 'google' (Gemini) or 'bedrock'",
    )
    model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model identifier for the selected provider",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature (0.0 for deterministic output)",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region (bedrock provider only)",
    )
