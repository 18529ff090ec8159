"""
Embedding backends for Voice-Map.
"""

from .base import BaseEmbedder, EmbeddingServiceError, PairPosition, Position, get_embedder
from .remote import RemoteEmbeddingClient

__all__ = [
    "BaseEmbedder",
    "EmbeddingServiceError",
    "PairPosition",
    "Position",
    "get_embedder",
    "RemoteEmbeddingClient",
]
