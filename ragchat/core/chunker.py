"""
Text chunking using RecursiveCharacterTextSplitter.

Splits documents into overlapping, boundary-aware chunks (paragraph, line,
word, character). The splitter decides where chunks break; chunk positions
are then located in the document with a forward-only cursor and any span the
splitter dropped (long whitespace runs) is filled with fixed-size windows.
Every chunk is an exact slice of its document and the chunks cover the
content contiguously.

Dependencies: langchain_text_splitters, ragchat.models
System role: Chunking for corpus ingestion and knowledge updates
"""

import logging
from collections.abc import Sequence

from langchain_text_splitters import RecursiveCharacterTextSplitter

from ragchat.core.exceptions import InvalidConfig
from ragchat.models.document import Chunk, Document

logger = logging.getLogger(__name__)


class TextChunker:
    """Split documents into chunks carrying the parent's metadata verbatim."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize chunker with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Maximum overlap between consecutive chunks

        Raises:
            InvalidConfig: Unless chunk_size > chunk_overlap >= 0
        """
        if chunk_size <= 0 or chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise InvalidConfig(chunk_size, chunk_overlap)

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            keep_separator=True,
            strip_whitespace=False,
            length_function=len,
        )

    def split(self, document: Document) -> list[Chunk]:
        """
        Split one document.

        Args:
            document: Document to split

        Returns:
            list[Chunk]: Ordered chunks (empty for empty content)
        """
        content = document.content
        if not content:
            return []

        pieces = self._splitter.split_text(content)
        spans = self._cover(self._locate(content, pieces), len(content))
        if len(spans) != len(pieces):
            logger.debug(
                f"{__name__}:split - Repaired splitter output pieces={len(pieces)} chunks={len(spans)}"
            )
        return [
            Chunk(content=content[start:end], metadata=document.metadata, start_index=start)
            for start, end in spans
        ]

    def _locate(self, content: str, pieces: Sequence[str]) -> list[tuple[int, int]]:
        """Find each piece at or after the previous one; unmatched pieces are skipped."""
        spans: list[tuple[int, int]] = []
        for piece in pieces:
            if not piece:
                continue
            lower = 0
            if spans:
                prev_start, prev_end = spans[-1]
                lower = max(prev_start + 1, prev_end - self.chunk_overlap)
            start = content.find(piece, lower)
            if start == -1:
                continue
            spans.append((start, start + len(piece)))
        return spans

    def _cover(self, spans: Sequence[tuple[int, int]], length: int) -> list[tuple[int, int]]:
        """
        Make spans contiguous over [0, length).

        Gaps become fixed-size windows. A span reaching back further than
        chunk_overlap (or to the previous start) is trimmed, and no span is
        longer than chunk_size.
        """
        result: list[tuple[int, int]] = []
        covered = 0
        for start, end in spans:
            if end <= covered:
                continue
            if start > covered:
                result.extend(self._windows(covered, start))
            elif result:
                start = max(start, covered - self.chunk_overlap, result[-1][0] + 1)
            end = min(end, start + self.chunk_size)
            result.append((start, end))
            covered = end
        if covered < length:
            result.extend(self._windows(covered, length))
        return result

    def _windows(self, begin: int, stop: int) -> list[tuple[int, int]]:
        return [(i, min(i + self.chunk_size, stop)) for i in range(begin, stop, self.chunk_size)]

    @staticmethod
    def reconstruct(chunks: Sequence[Chunk]) -> str:
        """
        Stitch chunks of one document back into its content.

        Args:
            chunks: Chunks in split order

        Returns:
            str: Reassembled content with overlaps removed

        Raises:
            ValueError: If the chunks leave a gap
        """
        text = ""
        for chunk in chunks:
            if chunk.start_index > len(text):
                raise ValueError(
                    f"Gap before chunk at {chunk.start_index} (covered up to {len(text)})"
                )
            text += chunk.content[len(text) - chunk.start_index:]
        return text
