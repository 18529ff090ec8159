"""
Base class for dataset loaders.
Defines the interface all loaders must implement.
"""

import logging
from abc import ABC, abstractmethod

import pandas as pd

logger = logging.getLogger(__name__)

SENTENCE_COLUMNS = ["active_sentence", "passive_sentence"]
COORD_COLUMNS = [
    "active_x_coord",
    "active_y_coord",
    "passive_x_coord",
    "passive_y_coord",
]
REQUIRED_COLUMNS = [
    "active_sentence",
    "active_x_coord",
    "active_y_coord",
    "passive_sentence",
    "passive_x_coord",
    "passive_y_coord",
]


class BaseDatasetLoader(ABC):
    """
    Abstract base class for dataset loaders.

    All loaders must return a DataFrame of sentence records, one row per
    active/passive pair, with these required columns:
    - active_sentence, active_x_coord, active_y_coord
    - passive_sentence, passive_x_coord, passive_y_coord

    Additional columns are allowed and will be preserved.
    """

    @abstractmethod
    def load(self) -> pd.DataFrame:
        """
        Load and return the dataset as a DataFrame.

        Returns:
            pd.DataFrame with the required sentence record columns
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Unique name for this dataset.

        Returns:
            String identifier for the dataset
        """
        pass

    def validate(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Validate that DataFrame has required columns and numeric coordinates.

        Coordinates that cannot be parsed are kept as NaN so the row still
        lines up with its pair; they are plotted as degenerate points.

        Args:
            df: DataFrame to validate

        Returns:
            Validated DataFrame

        Raises:
            ValueError: If required columns are missing
        """
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]

        if missing:
            raise ValueError(f"Dataset missing required columns: {missing}")

        df = df.copy()

        for col in SENTENCE_COLUMNS:
            df[col] = df[col].fillna("").astype(str)

        invalid_count = 0
        for col in COORD_COLUMNS:
            coerced = pd.to_numeric(df[col], errors="coerce")
            invalid_count += int((coerced.isna() & df[col].notna()).sum())
            df[col] = coerced.astype(float)

        if invalid_count > 0:
            logger.warning(
                f"Coerced {invalid_count} non-numeric coordinate values to NaN "
                f"in {len(df)} rows"
            )

        logger.info(f"Validated dataset: {len(df)} sentence pairs")

        return df.reset_index(drop=True)


# Registry for available loaders
_LOADER_REGISTRY: dict[str, type[BaseDatasetLoader]] = {}


def register_loader(name: str):
    """
    Decorator to register a loader class.

    Usage:
        @register_loader("embeddings")
        class EmbeddingsCsvLoader(BaseDatasetLoader):
            ...

    Raises:
        TypeError: If class doesn't inherit from BaseDatasetLoader
        ValueError: If name is already registered
    """
    def decorator(cls: type[BaseDatasetLoader]):
        if not issubclass(cls, BaseDatasetLoader):
            raise TypeError(f"{cls.__name__} must inherit from BaseDatasetLoader")
        if name in _LOADER_REGISTRY:
            raise ValueError(
                f"Loader '{name}' already registered by {_LOADER_REGISTRY[name].__name__}"
            )
        _LOADER_REGISTRY[name] = cls
        return cls
    return decorator


def get_loader(name: str, **kwargs) -> BaseDatasetLoader:
    """
    Get a loader instance by name.

    Args:
        name: Registered loader name
        **kwargs: Arguments passed to loader constructor

    Returns:
        Loader instance

    Raises:
        ValueError: If loader name not found
    """
    if name not in _LOADER_REGISTRY:
        available = list(_LOADER_REGISTRY.keys())
        raise ValueError(f"Unknown loader '{name}'. Available: {available}")

    return _LOADER_REGISTRY[name](**kwargs)


def list_loaders() -> list[str]:
    """Return list of registered loader names."""
    return list(_LOADER_REGISTRY.keys())
