"""
Interactive chat configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Corpus location and shell behaviour
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChatSettings(BaseSettings):
    """Corpus and interactive shell configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CHAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    corpus_path: str = Field(
        default="./corpus.txt",
        description="Path to the UTF-8 text corpus loaded at startup",
    )
    corpus_source: str | None = Field(
        default=None,
        description="Source identifier stored on corpus chunks (defaults to corpus_path)",
    )
    exit_command: str = Field(
        default="exit",
        description="Reserved input that ends the session",
    )
    prompt_label: str = Field(default="You: ", description="Input prompt shown to the user")
    answer_label: str = Field(default="AI: ", description="Prefix printed before answers")
