"""
Overlay that connects the active and passive phrasings of the selected pair.

The overlay is a two-state machine: no selection, or a selected point
index. Every chart interaction event recomputes the state from the hit test
alone; drawing turns the state into a dashed connector between the two
points sharing that index.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from voice_map.core.series import SeriesPair
import config


@dataclass(frozen=True)
class HoverState:
    """Currently selected point index, or None for no selection."""
    index: Optional[int] = None

    @property
    def is_selected(self) -> bool:
        return self.index is not None


NO_SELECTION = HoverState()

# Trace order of the chart: active first, passive second
ACTIVE_TRACE = 0
PASSIVE_TRACE = 1
SERIES_TRACES = (ACTIVE_TRACE, PASSIVE_TRACE)


@dataclass(frozen=True)
class HitElement:
    """A rendered point reported under the pointer by the chart hit test."""
    dataset_index: int
    index: int


@dataclass(frozen=True)
class ConnectorStyle:
    """Line settings for the connector; defaults draw an invisible solid black line."""
    dash: tuple[int, ...] = ()
    color: str = "black"
    width: float = 0

    @property
    def plotly_dash(self) -> str:
        """Dash pattern in Plotly's "Npx,Npx" syntax."""
        if not self.dash:
            return "solid"
        return ",".join(f"{d}px" for d in self.dash)

    @classmethod
    def from_config(cls) -> "ConnectorStyle":
        return cls(
            dash=tuple(config.CONNECTOR_DASH),
            color=config.CONNECTOR_COLOR,
            width=config.CONNECTOR_WIDTH,
        )


@dataclass(frozen=True)
class Connector:
    """A line segment between an active point and its passive counterpart."""
    index: int
    x0: float
    y0: float
    x1: float
    y1: float
    style: ConnectorStyle


class SentenceConnectorOverlay:
    """
    Draws a connector between Active[k] and Passive[k] for the selected k.

    The overlay holds only its style. The hover state is passed into and
    returned from each call.
    """

    def __init__(self, style: Optional[ConnectorStyle] = None):
        self.style = style or ConnectorStyle()

    def handle_event(self, state: HoverState, hits: Sequence[HitElement]) -> HoverState:
        """
        Compute the state after a pointer event.

        Args:
            state: State before the event (not consulted)
            hits: Nearest rendered points under the pointer, nearest first

        Returns:
            NO_SELECTION on a miss, otherwise the index of the nearest hit
            on the active or passive trace
        """
        series_hits = [h for h in hits if h.dataset_index in SERIES_TRACES]
        if not series_hits:
            return NO_SELECTION
        return HoverState(index=series_hits[0].index)

    def draw(self, state: HoverState, pair: SeriesPair) -> Optional[Connector]:
        """Return the connector for the selected index, or None if nothing should be drawn."""
        if not state.is_selected:
            return None

        index = state.index
        if not 0 <= index < len(pair):
            return None

        active = pair.active[index]
        passive = pair.passive[index]
        return Connector(
            index=index,
            x0=active.x,
            y0=active.y,
            x1=passive.x,
            y1=passive.y,
            style=self.style,
        )


def hits_from_selection(selection: Optional[Mapping[str, Any]]) -> list[HitElement]:
    """
    Convert a Streamlit Plotly selection payload into hit elements.

    Accepts either the full chart state (``{"selection": {...}}``) or the
    inner selection mapping. Missing or empty selections are a miss.
    """
    if not selection:
        return []

    inner = selection.get("selection", selection)
    points = inner.get("points") or []

    hits = []
    for point in points:
        curve = point.get("curve_number")
        index = point.get("point_index", point.get("point_number"))
        if curve is None or index is None:
            continue
        try:
            hits.append(HitElement(dataset_index=int(curve), index=int(index)))
        except (TypeError, ValueError):
            continue
    return hits
