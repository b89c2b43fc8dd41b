"""
In-memory vector index.

Stores embedded chunks in process memory and answers top-K queries with an
exact cosine similarity scan over all entries. The index is append-only and
lives for the lifetime of the process.

Dependencies: numpy, langchain_core.embeddings
System role: Vector index for corpus and knowledge-update chunks
"""

import logging
from collections.abc import Sequence

import numpy as np
from langchain_core.embeddings import Embeddings

from ragchat.boundary.vdb.base_vector_index import BaseVectorIndex
from ragchat.boundary.vdb.vector_schemas import IndexedEntry, ScoredChunk
from ragchat.core.exceptions import IndexingError, RetrievalError
from ragchat.models.document import Chunk

logger = logging.getLogger(__name__)


class InMemoryVectorIndex(BaseVectorIndex):
    """
    Append-only vector index with exact cosine ranking.

    Insertions are all-or-nothing: every chunk of a batch is embedded and
    validated before any entry is appended.
    """

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Initialize an empty index.

        Args:
            embeddings: Embedding service used for chunks and queries
        """
        self._embeddings = embeddings
        self._entries: list[IndexedEntry] = []
        self._matrix: np.ndarray | None = None
        self._dimension: int | None = None

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def dimension(self) -> int | None:
        """Embedding dimension, fixed by the first insertion."""
        return self._dimension

    @property
    def entries(self) -> tuple[IndexedEntry, ...]:
        """Read-only snapshot of stored entries in insertion order."""
        return tuple(self._entries)

    async def insert(self, chunks: Sequence[Chunk]) -> int:
        """
        Embed chunks in one batch and append them.

        Args:
            chunks: Chunks to store

        Returns:
            int: Number of entries appended

        Raises:
            IndexingError: Embedding failed or returned malformed vectors
        """
        if not chunks:
            return 0

        logger.info(f"{__name__}:insert - START chunks={len(chunks)}")
        try:
            vectors = await self._embeddings.aembed_documents([c.content for c in chunks])
        except Exception as e:
            logger.error(f"{__name__}:insert - Embedding FAILED: {type(e).__name__}: {e}")
            raise IndexingError(
                f"Failed to embed chunks: {e}", chunk_count=len(chunks)
            ) from e

        if len(vectors) != len(chunks):
            raise IndexingError(
                "Embedding service returned a different number of vectors",
                chunk_count=len(chunks),
                details={"vectors": len(vectors)},
            )

        try:
            batch = np.asarray(vectors, dtype=np.float32)
        except ValueError as e:
            raise IndexingError(
                "Embedding vectors have inconsistent dimensions", chunk_count=len(chunks)
            ) from e
        dimension = self._dimension or (batch.shape[1] if batch.ndim == 2 else None)
        if batch.ndim != 2 or batch.shape[1] != dimension or dimension == 0:
            raise IndexingError(
                "Embedding vectors have inconsistent dimensions",
                chunk_count=len(chunks),
                details={"expected_dimension": dimension, "shape": list(batch.shape)},
            )

        start = len(self._entries)
        new_entries = [
            IndexedEntry(chunk=chunk, embedding=list(map(float, vector)), position=start + i)
            for i, (chunk, vector) in enumerate(zip(chunks, vectors))
        ]

        # Commit only after every vector is validated
        normalized = _normalize_rows(batch)
        self._matrix = normalized if self._matrix is None else np.vstack([self._matrix, normalized])
        self._entries.extend(new_entries)
        self._dimension = dimension

        logger.info(f"{__name__}:insert - END appended={len(new_entries)} total={self.count}")
        return len(new_entries)

    async def query(self, text: str, k: int) -> list[ScoredChunk]:
        """
        Return up to k chunks most similar to text, best first.

        Ties keep insertion order (earlier entry wins).

        Args:
            text: Query text
            k: Maximum number of results

        Returns:
            list[ScoredChunk]: Ranked results (empty on an empty index)

        Raises:
            ValueError: k is not positive
            RetrievalError: Query embedding failed
        """
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        if self._matrix is None or not self._entries:
            logger.info(f"{__name__}:query - Index empty, returning no results")
            return []

        try:
            query_vector = await self._embeddings.aembed_query(text)
        except Exception as e:
            logger.error(f"{__name__}:query - Embedding FAILED: {type(e).__name__}: {e}")
            raise RetrievalError(f"Failed to embed query: {e}") from e

        q = np.asarray(query_vector, dtype=np.float32).reshape(-1)
        if q.shape[0] != self._dimension:
            raise RetrievalError(
                "Query embedding dimension does not match the index",
                details={"expected": self._dimension, "actual": int(q.shape[0])},
            )

        norm = np.linalg.norm(q)
        if norm > 0:
            q = q / norm
        sims = self._matrix @ q

        # Stable sort keeps insertion order among equal scores
        order = np.argsort(-sims, kind="stable")[:k]
        results = [
            ScoredChunk(chunk=self._entries[i].chunk, score=float(sims[i]))
            for i in order
        ]
        logger.info(f"{__name__}:query - k={k} returned={len(results)} of {self.count}")
        return results


def _normalize_rows(matrix: np.ndarray) -> np.ndarray:
    """L2-normalize rows; zero rows stay zero."""
    norms = np.linalg.norm(matrix, axis=1, keepdims=True)
    norms[norms == 0] = 1.0
    return matrix / norms
