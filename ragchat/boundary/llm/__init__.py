"""
Language model and embedding backends.

Dependencies: langchain_google_genai, langchain_aws
System role: Factories for the external model services
"""

from ragchat.boundary.llm.model_factory import (
    completion_text,
    get_chat_model,
    get_embeddings,
)

__all__ = ["completion_text", "get_chat_model", "get_embeddings"]
