"""
Loader for the precomputed sentence embedding table.
Reads data/embeddings.csv with one active/passive pair per row.
"""

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from .base import BaseDatasetLoader, register_loader
import config

logger = logging.getLogger(__name__)


@register_loader("embeddings")
class EmbeddingsCsvLoader(BaseDatasetLoader):
    """
    Loader for the 2D embedding coordinates of sentence pairs.

    Expected CSV format (header row required):
    - active_sentence, active_x_coord, active_y_coord
    - passive_sentence, passive_x_coord, passive_y_coord
    """

    def __init__(self, csv_path: Optional[Path] = None):
        """
        Initialize the embeddings loader.

        Args:
            csv_path: Path to the CSV file (defaults to config.EMBEDDINGS_CSV_PATH)
        """
        self.csv_path = Path(csv_path) if csv_path else config.EMBEDDINGS_CSV_PATH

    @property
    def name(self) -> str:
        return "embeddings"

    def load(self) -> pd.DataFrame:
        """
        Load the embeddings CSV.

        Returns:
            DataFrame of sentence records with float coordinates

        Raises:
            FileNotFoundError: If the CSV does not exist
            ValueError: If required columns are missing
        """
        if not self.csv_path.exists():
            raise FileNotFoundError(f"Embeddings file not found: {self.csv_path}")

        # Keep raw strings so validate() can report unparsable coordinates
        df = pd.read_csv(self.csv_path, dtype=str, skipinitialspace=True)
        df.columns = [c.strip() for c in df.columns]
        logger.info(f"Loaded {len(df)} rows from {self.csv_path}")

        return self.validate(df)
