"""
Application layer.

Corpus loading and the chat service that wires the conversational core.
"""

from ragchat.application.chat_service import ChatService
from ragchat.application.corpus_loader import CorpusLoader

__all__ = ["ChatService", "CorpusLoader"]
