"""
Conversational core.

Chunking, intent classification, knowledge updates, retrieval, grounded
generation and the per-turn state machine that sequences them.
"""
