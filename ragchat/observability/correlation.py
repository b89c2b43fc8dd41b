"""
Turn correlation ID context.

Tracks the ID of the conversational turn being executed so every log line
emitted while the turn runs can be tied back to it. Uses contextvars so the
value follows the turn across await points.

Dependencies: contextvars
System role: Turn tracing across components
"""

from contextvars import ContextVar
import logging
import uuid

turn_id_ctx: ContextVar[str] = ContextVar("turn_id", default="")


def set_turn_id(turn_id: str | None = None) -> str:
    """
    Set turn ID in context.

    Args:
        turn_id: Optional turn ID (generates new if None)

    Returns:
        str: The turn ID that was set
    """
    value = turn_id or uuid.uuid4().hex[:12]
    turn_id_ctx.set(value)
    return value


def get_turn_id() -> str:
    """
    Get current turn ID from context.

    Returns:
        str: Current turn ID, or "-" outside of a turn
    """
    return turn_id_ctx.get() or "-"


def clear_turn_id() -> None:
    """Clear turn ID from context."""
    turn_id_ctx.set("")


class TurnIdFilter(logging.Filter):
    """Inject the current turn ID into every log record as `turn_id`."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.turn_id = get_turn_id()
        return True
