"""
Turn state record.

The mutable record threaded through one conversational turn. Each node of
the turn state machine assigns only the fields it owns.

Dependencies: dataclasses, enum, vector_schemas
System role: Per-turn state for the orchestrator
"""

from dataclasses import dataclass, field
from enum import Enum

from ragchat.boundary.vdb.vector_schemas import ScoredChunk


class Intent(str, Enum):
    """Classified purpose of a user turn."""

    QUERY = "query"
    UPDATE = "update"
    UNSET = "unset"


@dataclass
class TurnState:
    """State of a single question/answer (or question/update) cycle."""

    question: str
    intent: Intent = Intent.UNSET
    update_info: str | None = None
    context: list[ScoredChunk] = field(default_factory=list)
    answer: str | None = None

    # Bookkeeping
    turn_id: str = ""
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
