"""
Knowledge updater.

Turns an update payload into a timestamped `ai-update` document, chunks it
with the same chunker as the corpus and appends it to the vector index.
Older facts are never modified; conflicts are resolved at answer time by
timestamp priority.

Dependencies: ragchat.boundary.vdb, ragchat.core.chunker
System role: Update branch of the turn state machine
"""

import logging

from ragchat.boundary.vdb.base_vector_index import BaseVectorIndex
from ragchat.core.chunker import TextChunker
from ragchat.core.exceptions import IndexingError
from ragchat.models.document import Document

logger = logging.getLogger(__name__)

UPDATE_SOURCE = "ai-update"

UPDATE_CONFIRMATION = "Information received and stored in my memory."
EMPTY_UPDATE_ACK = "No update information was provided, so nothing was stored."
UPDATE_FAILED_MESSAGE = "Sorry, I could not store that information. Please try again."


class KnowledgeUpdater:
    """Append user-supplied facts to the vector index."""

    def __init__(self, index: BaseVectorIndex, chunker: TextChunker) -> None:
        self._index = index
        self._chunker = chunker

    async def apply(self, update_info: str | None) -> str:
        """
        Store an update.

        Args:
            update_info: Update payload (tag already removed), or None

        Returns:
            str: Confirmation, empty-update acknowledgment or failure message
        """
        if not update_info or not update_info.strip():
            logger.warning(f"{__name__}:apply - Update info is empty, skipping update")
            return EMPTY_UPDATE_ACK

        document = Document.create(content=update_info, source=UPDATE_SOURCE)
        chunks = self._chunker.split(document)

        try:
            appended = await self._index.insert(chunks)
        except IndexingError as e:
            logger.error(f"{__name__}:apply - Update FAILED: {e}")
            return UPDATE_FAILED_MESSAGE

        logger.info(
            f"{__name__}:apply - Update stored chunks={appended} "
            f"timestamp={document.metadata.timestamp}"
        )
        return UPDATE_CONFIRMATION
