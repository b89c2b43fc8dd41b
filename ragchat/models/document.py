"""
Document and chunk domain models.

A Document is a unit of ingested text with provenance metadata (source and
ISO-8601 timestamp). Chunks are contiguous slices of a Document's content
that inherit its metadata unchanged.

Dependencies: pydantic
System role: Data structures for ingestion and retrieval
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


class DocumentMetadata(BaseModel):
    """Provenance attached to a document and every chunk cut from it."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(min_length=1, description="Source identifier (path or 'ai-update')")
    timestamp: str = Field(description="ISO-8601 creation timestamp")

    @field_validator("timestamp")
    @classmethod
    def _parseable_timestamp(cls, value: str) -> str:
        try:
            datetime.fromisoformat(value)
        except ValueError as e:
            raise ValueError(f"timestamp is not ISO-8601: {value!r}") from e
        return value

    @property
    def parsed_timestamp(self) -> datetime:
        """Timestamp as a datetime."""
        return datetime.fromisoformat(self.timestamp)


class Document(BaseModel):
    """Immutable unit of ingested text."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Document text")
    metadata: DocumentMetadata = Field(description="Document provenance")

    @classmethod
    def create(cls, content: str, source: str, timestamp: str | None = None) -> "Document":
        """
        Build a document, stamping the current UTC time when none is given.

        Args:
            content: Document text
            source: Source identifier
            timestamp: Optional ISO-8601 timestamp

        Returns:
            Document: New immutable document
        """
        return cls(
            content=content,
            metadata=DocumentMetadata(source=source, timestamp=timestamp or utc_now_iso()),
        )


class Chunk(BaseModel):
    """Contiguous slice of a document; the unit of embedding and storage."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Chunk text content")
    metadata: DocumentMetadata = Field(description="Parent document metadata")
    start_index: int = Field(default=0, ge=0, description="Offset of the chunk in the parent content")

    @property
    def source(self) -> str:
        return self.metadata.source

    @property
    def timestamp(self) -> str:
        return self.metadata.timestamp
