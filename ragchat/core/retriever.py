"""
Retriever.

Delegates directly to the vector index; no filtering, reranking or
deduplication.

Dependencies: ragchat.boundary.vdb
System role: Retrieval node of the turn state machine
"""

import logging

from ragchat.boundary.vdb.base_vector_index import BaseVectorIndex
from ragchat.boundary.vdb.vector_schemas import ScoredChunk

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5


class Retriever:
    """Top-K retrieval over the vector index."""

    def __init__(self, index: BaseVectorIndex, top_k: int = DEFAULT_TOP_K) -> None:
        if top_k <= 0:
            raise ValueError(f"top_k must be positive, got {top_k}")
        self._index = index
        self.top_k = top_k

    async def retrieve(self, question: str) -> list[ScoredChunk]:
        """Return the top-K chunks for a question, best first."""
        results = await self._index.query(question, self.top_k)
        if not results:
            logger.warning(f"{__name__}:retrieve - No context found")
        return results
