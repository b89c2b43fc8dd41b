"""
ragchat: retrieval-augmented chat over a private text corpus.

Answers questions strictly from the corpus and accepts new facts through
the `[update]` tag.
"""

__version__ = "0.1.0"
