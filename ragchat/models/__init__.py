"""
Domain models.

Documents, chunks and the per-turn state record.
"""
