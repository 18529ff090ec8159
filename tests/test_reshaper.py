"""Tests for reshaping sentence records into point series."""

import math

import pandas as pd
import pytest

from voice_map.core.reshaper import reshape
from voice_map.core.series import Point, Series, SeriesPair
import config


def _records(n):
    return [
        {
            "active_sentence": f"active {i}",
            "active_x_coord": float(i),
            "active_y_coord": float(i) + 0.5,
            "passive_sentence": f"passive {i}",
            "passive_x_coord": float(-i),
            "passive_y_coord": float(-i) - 0.5,
        }
        for i in range(n)
    ]


@pytest.mark.parametrize("n", [0, 1, 2, 57, 100])
def test_series_lengths_match_row_count(n):
    pair = reshape(_records(n))
    assert len(pair.active) == n
    assert len(pair.passive) == n


def test_indices_refer_to_same_row():
    pair = reshape(_records(5))
    for i in range(5):
        assert pair.active[i].label == f"active {i}"
        assert pair.passive[i].label == f"passive {i}"
        assert pair.active[i].x == float(i)
        assert pair.passive[i].x == float(-i)


def test_truncates_to_first_hundred_rows_in_order():
    pair = reshape(_records(150))
    assert len(pair) == config.ROW_LIMIT == 100
    assert pair.active.labels == [f"active {i}" for i in range(100)]
    assert pair.passive[-1].label == "passive 99"


def test_custom_limit():
    assert len(reshape(_records(10), limit=3)) == 3


def test_accepts_dataframe():
    df = pd.DataFrame(_records(120))
    pair = reshape(df)
    assert len(pair) == 100
    assert pair.active[0].y == 0.5


def test_series_styling():
    pair = reshape(_records(2))
    assert pair.active.name == "Active"
    assert pair.passive.name == "Passive"
    assert pair.active.border_colors == [config.ACTIVE_BORDER_COLOR] * 2
    assert pair.active.fill_colors == [config.ACTIVE_FILL_COLOR] * 2
    assert pair.passive.border_colors == [config.PASSIVE_BORDER_COLOR] * 2
    assert pair.passive.fill_colors == [config.PASSIVE_FILL_COLOR] * 2


def test_malformed_coordinates_become_nan():
    rows = _records(1)
    rows[0]["active_x_coord"] = "not a number"
    del rows[0]["passive_y_coord"]
    pair = reshape(rows)
    assert math.isnan(pair.active[0].x)
    assert math.isnan(pair.passive[0].y)
    assert pair.active[0].y == 0.5


def test_string_coordinates_are_parsed():
    rows = _records(1)
    rows[0]["active_x_coord"] = "1.25"
    assert reshape(rows).active[0].x == 1.25


def test_series_pair_rejects_unequal_lengths():
    point = Point(0.0, 0.0, "x", "#000", "#000")
    with pytest.raises(ValueError, match="lengths differ"):
        SeriesPair(active=Series("Active", (point,)), passive=Series("Passive", ()))


def test_append_returns_new_series():
    pair = reshape(_records(2))
    point = Point(9.0, 9.0, "new", "#000", "#fff")
    extended = pair.append(point, point)
    assert len(extended) == 3
    assert len(pair) == 2
