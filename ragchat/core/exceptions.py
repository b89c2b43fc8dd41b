"""
Exception hierarchy for ragchat.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class RAGChatException(Exception):
    """Base exception for all ragchat errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class IngestionError(RAGChatException):
    """Raised when the corpus cannot be read or decoded at startup."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ingestion error.

        Args:
            message: Error message
            path: Corpus path that failed to load
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class InvalidConfig(RAGChatException):
    """Raised when configuration is invalid, e.g. chunk overlap >= chunk size."""

    def __init__(
        self,
        chunk_size: int | None = None,
        chunk_overlap: int | None = None,
        details: dict[str, Any] | None = None,
        message: str = "Chunk configuration requires chunk_size > chunk_overlap >= 0",
    ) -> None:
        """
        Initialize configuration error.

        Args:
            chunk_size: Offending chunk size, when the chunker rejected it
            chunk_overlap: Offending chunk overlap, when the chunker rejected it
            details: Additional context (e.g. settings validation errors)
            message: Error message
        """
        details = details or {}
        if chunk_size is not None or chunk_overlap is not None:
            details.update({"chunk_size": chunk_size, "chunk_overlap": chunk_overlap})
        super().__init__(message, details)


class IndexingError(RAGChatException):
    """Raised when embedding or inserting chunks into the index fails."""

    def __init__(
        self,
        message: str,
        chunk_count: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize indexing error.

        Args:
            message: Error message
            chunk_count: Number of chunks in the failed insertion
            details: Additional context
        """
        details = details or {}
        if chunk_count is not None:
            details["chunk_count"] = chunk_count
        super().__init__(message, details)


class RetrievalError(RAGChatException):
    """Raised when a similarity query against the index fails."""

    pass


class ClassificationAmbiguity(RAGChatException):
    """Raised when a classifier completion is neither 'query' nor 'update'."""

    def __init__(self, completion: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["completion"] = completion
        self.completion = completion
        super().__init__(f"Unrecognised intent label: {completion!r}", details)


class RoutingError(RAGChatException):
    """Raised when the turn state machine has no transition for a state."""

    def __init__(self, node: str, intent: str | None = None) -> None:
        details = {"node": node}
        if intent is not None:
            details["intent"] = intent
        super().__init__(f"No transition out of node '{node}'", details)
