"""
Reshapes sentence records into the two point series drawn on the chart.
"""

import math
from typing import Any, Iterable, Mapping, Union

import pandas as pd

from .series import Point, Series, SeriesPair
import config

Records = Union[pd.DataFrame, Iterable[Mapping[str, Any]]]


def reshape(records: Records, limit: int = config.ROW_LIMIT) -> SeriesPair:
    """
    Convert sentence records into parallel active/passive series.

    Only the first ``limit`` records are kept, in their original order.
    Coordinates are not validated: anything that is not a number becomes NaN.

    Args:
        records: DataFrame or sequence of mappings with the sentence record columns
        limit: Maximum number of records to keep

    Returns:
        SeriesPair with one point per record in each series
    """
    if isinstance(records, pd.DataFrame):
        rows = records.head(limit).to_dict("records")
    else:
        rows = list(records)[:limit]

    active_points = tuple(
        Point(
            x=_to_float(row.get("active_x_coord")),
            y=_to_float(row.get("active_y_coord")),
            label=_to_label(row.get("active_sentence")),
            border_color=config.ACTIVE_BORDER_COLOR,
            fill_color=config.ACTIVE_FILL_COLOR,
        )
        for row in rows
    )
    passive_points = tuple(
        Point(
            x=_to_float(row.get("passive_x_coord")),
            y=_to_float(row.get("passive_y_coord")),
            label=_to_label(row.get("passive_sentence")),
            border_color=config.PASSIVE_BORDER_COLOR,
            fill_color=config.PASSIVE_FILL_COLOR,
        )
        for row in rows
    )

    return SeriesPair(
        active=Series(name="Active", points=active_points),
        passive=Series(name="Passive", points=passive_points),
    )


def _to_float(value: Any) -> float:
    if value is None:
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _to_label(value: Any) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return str(value)
