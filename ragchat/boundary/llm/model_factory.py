"""
Model factory for selecting the chat and embedding backends.

Depends on LLM_PROVIDER / EMBEDDING_PROVIDER settings. Provider SDKs are
imported lazily so only the selected backend needs credentials.

Dependencies: langchain_google_genai, langchain_aws, ragchat.configs
System role: Language model and embedding service instantiation
"""

import logging
from typing import Any

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel

from ragchat.configs.embedding import EmbeddingSettings
from ragchat.configs.llm import LLMSettings

logger = logging.getLogger(__name__)


def get_chat_model(settings: LLMSettings) -> BaseChatModel:
    """
    Build the chat model for classification and generation.

    Args:
        settings: Language model settings

    Returns:
        BaseChatModel: Configured chat model

    Raises:
        ValueError: If the provider is unknown
    """
    provider = settings.provider.lower()

    if provider == "google":
        from langchain_google_genai import ChatGoogleGenerativeAI

        logger.info(f"{__name__}:get_chat_model - Creating Gemini chat model model={settings.model}")
        return ChatGoogleGenerativeAI(
            model=settings.model,
            temperature=settings.temperature,
        )

    elif provider == "bedrock":
        from langchain_aws import ChatBedrockConverse

        logger.info(f"{__name__}:get_chat_model - Creating Bedrock chat model model={settings.model}")
        return ChatBedrockConverse(
            model=settings.model,
            region_name=settings.region,
            temperature=settings.temperature,
        )

    raise ValueError(
        f"Invalid LLM_PROVIDER: {provider}. Must be 'google' or 'bedrock'."
    )


def get_embeddings(settings: EmbeddingSettings) -> Embeddings:
    """
    Build the embedding service used by the vector index.

    Args:
        settings: Embedding settings

    Returns:
        Embeddings: Configured embedding client

    Raises:
        ValueError: If the provider is unknown
    """
    provider = settings.provider.lower()

    if provider == "google":
        from langchain_google_genai import GoogleGenerativeAIEmbeddings

        logger.info(f"{__name__}:get_embeddings - Creating Gemini embeddings model={settings.model}")
        return GoogleGenerativeAIEmbeddings(model=settings.model)

    elif provider == "bedrock":
        from langchain_aws import BedrockEmbeddings

        logger.info(f"{__name__}:get_embeddings - Creating Bedrock embeddings model={settings.model}")
        return BedrockEmbeddings(
            model_id=settings.model,
            region_name=settings.region,
        )

    raise ValueError(
        f"Invalid EMBEDDING_PROVIDER: {provider}. Must be 'google' or 'bedrock'."
    )


def completion_text(response: Any) -> str:
    """
    Extract plain text from a model response.

    Handles chat messages whose content is a string or a list of parts
    (Bedrock and Gemini may return either), and plain string completions.

    Args:
        response: AIMessage, message chunk or string

    Returns:
        str: Completion text
    """
    content = getattr(response, "content", response)
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)
