"""
Dataset loaders for Voice-Map.
"""

from .base import BaseDatasetLoader, get_loader, list_loaders, register_loader
from .embeddings import EmbeddingsCsvLoader

__all__ = [
    "BaseDatasetLoader",
    "get_loader",
    "list_loaders",
    "register_loader",
    "EmbeddingsCsvLoader",
]
