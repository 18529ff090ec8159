"""
Base class for embedding backends.
Defines the interface all embedders must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class EmbeddingServiceError(RuntimeError):
    """Raised when a sentence pair could not be placed in embedding space."""


@dataclass(frozen=True)
class Position:
    """2D coordinates of one sentence."""
    x: float
    y: float


@dataclass(frozen=True)
class PairPosition:
    """Coordinates of an active sentence and its passive counterpart."""
    active: Position
    passive: Position


class BaseEmbedder(ABC):
    """
    Abstract base class for sentence pair embedding backends.

    All embedders must:
    - Place an active/passive sentence pair in the same 2D space as the dataset
    - Raise EmbeddingServiceError when that is not possible
    - Provide a unique name
    """

    @abstractmethod
    def locate(self, active: str, passive: str) -> PairPosition:
        """
        Embed a sentence pair and return its 2D coordinates.

        Args:
            active: Sentence in the active voice
            passive: Same sentence in the passive voice

        Returns:
            PairPosition with one coordinate pair per sentence

        Raises:
            EmbeddingServiceError: If the backend fails or answers with garbage
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Unique name for this embedder.

        Returns:
            String identifier for the embedder
        """
        pass


# Registry for available embedders
_EMBEDDER_REGISTRY: dict[str, type[BaseEmbedder]] = {}


def register_embedder(name: str):
    """
    Decorator to register an embedder class.

    Usage:
        @register_embedder("remote")
        class RemoteEmbeddingClient(BaseEmbedder):
            ...
    """
    def decorator(cls: type[BaseEmbedder]):
        _EMBEDDER_REGISTRY[name] = cls
        return cls
    return decorator


def get_embedder(name: str, **kwargs) -> BaseEmbedder:
    """
    Get an embedder instance by name.

    Args:
        name: Registered embedder name
        **kwargs: Arguments passed to embedder constructor

    Returns:
        Embedder instance

    Raises:
        ValueError: If embedder name not found
    """
    if name not in _EMBEDDER_REGISTRY:
        available = list(_EMBEDDER_REGISTRY.keys())
        raise ValueError(f"Unknown embedder '{name}'. Available: {available}")

    return _EMBEDDER_REGISTRY[name](**kwargs)
