"""
Corpus loader.

Reads the text corpus once at startup and wraps it in a Document stamped
with the load time.

Dependencies: pathlib, ragchat.models
System role: Startup ingestion source
"""

import logging
from pathlib import Path

from ragchat.core.exceptions import IngestionError
from ragchat.models.document import Document

logger = logging.getLogger(__name__)


class CorpusLoader:
    """Load a UTF-8 text file as the initial corpus document."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def load(self, path: str | Path, source: str | None = None) -> Document:
        """
        Read the corpus file.

        Args:
            path: Corpus file path
            source: Source identifier for the document (defaults to the path)

        Returns:
            Document: Corpus document timestamped now

        Raises:
            IngestionError: File missing, unreadable or not decodable
        """
        corpus_path = Path(path)
        logger.info(f"{__name__}:load - Reading corpus path={corpus_path}")
        try:
            content = corpus_path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise IngestionError(
                f"Could not read corpus: {e}",
                path=str(corpus_path),
                details={"error_type": type(e).__name__},
            ) from e

        logger.info(f"{__name__}:load - Corpus read chars={len(content)}")
        return Document.create(content=content, source=source or str(path))
