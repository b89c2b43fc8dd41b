"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic keyword embeddings, scripted language models,
chunker / index fixtures and temp corpus files.
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import re
import tempfile
import zlib
from collections.abc import Callable
from pathlib import Path

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from ragchat.boundary.vdb.memory_vector_store import InMemoryVectorIndex
from ragchat.core.chunker import TextChunker
from ragchat.models.document import Chunk, DocumentMetadata

EMBEDDING_DIM = 512


class KeywordEmbeddings(Embeddings):
    """
    Bag-of-words embeddings using a stable hash per lowercase word.

    Texts sharing words are close; texts sharing none are orthogonal.
    """

    def __init__(self, dimension: int = EMBEDDING_DIM) -> None:
        self.dimension = dimension
        self.document_calls = 0
        self.query_calls = 0

    def _embed(self, text: str) -> list[float]:
        vector = [0.0] * self.dimension
        for word in re.findall(r"\w+", text.lower()):
            vector[zlib.crc32(word.encode()) % self.dimension] += 1.0
        return vector

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls += 1
        return [self._embed(t) for t in texts]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls += 1
        return self._embed(text)


class FailingEmbeddings(Embeddings):
    """Embedding service that is always down."""

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        raise ConnectionError("embedding service unavailable")

    def embed_query(self, text: str) -> list[float]:
        raise ConnectionError("embedding service unavailable")


def scripted_llm(respond: Callable[[str], str]) -> RunnableLambda:
    """Language model stand-in: maps the prompt string to a reply via respond."""
    return RunnableLambda(lambda prompt: AIMessage(content=respond(prompt)))


def tag_aware_reply(prompt: str) -> str:
    """Classifier behaviour of a well-behaved model: label by the [update] tag."""
    question = prompt.rsplit("Input:", 1)[-1]
    return "update" if "[update]" in question else "query"


def make_chunk(content: str, source: str = "corpus.txt", timestamp: str = "2024-01-01T00:00:00+00:00") -> Chunk:
    return Chunk(content=content, metadata=DocumentMetadata(source=source, timestamp=timestamp))


@pytest.fixture
def embeddings() -> KeywordEmbeddings:
    """Deterministic keyword embeddings."""
    return KeywordEmbeddings()


@pytest.fixture
def index(embeddings: KeywordEmbeddings) -> InMemoryVectorIndex:
    """Empty in-memory index over keyword embeddings."""
    return InMemoryVectorIndex(embeddings)


@pytest.fixture
def chunker() -> TextChunker:
    """Small chunker so short test texts produce several chunks."""
    return TextChunker(chunk_size=100, chunk_overlap=20)


@pytest.fixture
def temp_corpus():
    """
    Create a temporary corpus file.

    Yields:
        Path: Path to a UTF-8 corpus with a few facts
    """
    with tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False, encoding="utf-8") as f:
        f.write(
            "The office opens at 9am on weekdays.\n\n"
            "The weekly team meeting is at 3pm on Monday.\n\n"
            "Parking is available in the north garage."
        )
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()



@pytest.fixture
def failing_embeddings() -> FailingEmbeddings:
    """Embeddings that raise on every call."""
    return FailingEmbeddings()


@pytest.fixture
def llm_factory() -> Callable[[Callable[[str], str]], RunnableLambda]:
    """Build a scripted language model from a prompt -> reply function."""
    return scripted_llm


@pytest.fixture
def classifier_llm() -> RunnableLambda:
    """Scripted classifier model that labels by the [update] tag."""
    return scripted_llm(tag_aware_reply)


@pytest.fixture
def chunk_factory() -> Callable[..., Chunk]:
    """Build chunks with default provenance."""
    return make_chunk
