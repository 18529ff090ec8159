# conftest.py
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent.resolve()

# Add project root to Python path so `config` and `voice_map` import
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from voice_map.embedders.base import BaseEmbedder, EmbeddingServiceError, PairPosition, Position  # noqa: E402

HEADER = (
    "active_sentence,active_x_coord,active_y_coord,"
    "passive_sentence,passive_x_coord,passive_y_coord\n"
)


@pytest.fixture
def make_csv(tmp_path):
    """Write sentence record rows to a CSV and return its path."""
    def _make(rows, header=HEADER):
        path = tmp_path / "embeddings.csv"
        path.write_text(header + "".join(row + "\n" for row in rows))
        return path
    return _make


@pytest.fixture
def two_row_records():
    return [
        {
            "active_sentence": "The cat chased the mouse.",
            "active_x_coord": 0.5,
            "active_y_coord": 1.0,
            "passive_sentence": "The mouse was chased by the cat.",
            "passive_x_coord": 0.75,
            "passive_y_coord": 1.25,
        },
        {
            "active_sentence": "The chef cooked dinner.",
            "active_x_coord": -1.0,
            "active_y_coord": -2.0,
            "passive_sentence": "Dinner was cooked by the chef.",
            "passive_x_coord": -1.5,
            "passive_y_coord": -2.5,
        },
    ]


class FakeEmbedder(BaseEmbedder):
    """Embedder returning fixed positions, or raising when ``error`` is set."""

    def __init__(self, positions=None, error=None):
        self.positions = positions or PairPosition(
            active=Position(x=1.0, y=1.0), passive=Position(x=2.0, y=2.0)
        )
        self.error = error
        self.calls = []

    @property
    def name(self) -> str:
        return "fake"

    def locate(self, active: str, passive: str) -> PairPosition:
        self.calls.append((active, passive))
        if self.error is not None:
            raise self.error
        return self.positions


@pytest.fixture
def fake_embedder():
    return FakeEmbedder()


@pytest.fixture
def failing_embedder():
    return FakeEmbedder(error=EmbeddingServiceError("service unavailable"))
