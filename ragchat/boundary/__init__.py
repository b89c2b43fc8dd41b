"""
Boundary layer.

Adapters to the external services: the vector index and the language
model / embedding backends.
"""
