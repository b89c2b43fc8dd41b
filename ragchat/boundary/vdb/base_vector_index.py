"""
Abstract vector index contract.

Any index structure (exact scan, approximate index) can sit behind this
contract as long as it keeps the ranking semantics: best-first, at most k,
ties broken by insertion order.

Dependencies: abc
System role: Interface for vector index implementations
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ragchat.boundary.vdb.vector_schemas import ScoredChunk
from ragchat.models.document import Chunk


class BaseVectorIndex(ABC):
    """Append-only vector index."""

    @abstractmethod
    async def insert(self, chunks: Sequence[Chunk]) -> int:
        """
        Embed and append chunks.

        Args:
            chunks: Chunks to store

        Returns:
            int: Number of entries appended

        Raises:
            IndexingError: Embedding or insertion failed; nothing was appended
        """

    @abstractmethod
    async def query(self, text: str, k: int) -> list[ScoredChunk]:
        """
        Return up to k stored chunks most similar to text, best first.

        Args:
            text: Query text
            k: Maximum number of results (positive)

        Returns:
            list[ScoredChunk]: Results, empty on an empty index

        Raises:
            RetrievalError: Query embedding failed
        """

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of stored entries."""

    def __len__(self) -> int:
        return self.count
