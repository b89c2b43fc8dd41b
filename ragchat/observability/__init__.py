"""
Observability module.

Provides logging configuration, per-turn correlation IDs and safe log helpers.
"""

from ragchat.observability.correlation import (
    clear_turn_id,
    get_turn_id,
    set_turn_id,
)
from ragchat.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "set_turn_id",
    "get_turn_id",
    "clear_turn_id",
]
