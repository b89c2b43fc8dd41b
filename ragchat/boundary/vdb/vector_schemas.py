"""
Vector database schemas.

Pydantic models for stored entries and search results.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, ConfigDict, Field

from ragchat.models.document import Chunk


class IndexedEntry(BaseModel):
    """A chunk and its embedding, owned by the index. Never mutated."""

    model_config = ConfigDict(frozen=True)

    chunk: Chunk = Field(description="Stored chunk")
    embedding: list[float] = Field(description="Chunk embedding vector")
    position: int = Field(ge=0, description="Insertion order within the index")


class ScoredChunk(BaseModel):
    """Single result from vector search."""

    model_config = ConfigDict(frozen=True)

    chunk: Chunk = Field(description="Matched chunk")
    score: float = Field(description="Cosine similarity to the query (higher is closer)")
