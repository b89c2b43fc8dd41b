"""
Vector database boundary layer.

Provides the vector index used for storage and retrieval operations.
- InMemoryVectorIndex: exact cosine scan over in-process entries

Dependencies: numpy, langchain_core
System role: Vector store adapter for RAG retrieval
"""

from ragchat.boundary.vdb.base_vector_index import BaseVectorIndex
from ragchat.boundary.vdb.memory_vector_store import InMemoryVectorIndex
from ragchat.boundary.vdb.vector_schemas import IndexedEntry, ScoredChunk

__all__ = [
    "BaseVectorIndex",
    "InMemoryVectorIndex",
    "IndexedEntry",
    "ScoredChunk",
]
