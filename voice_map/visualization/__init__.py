"""
Chart rendering for Voice-Map.
"""

from .overlay import (
    NO_SELECTION,
    Connector,
    ConnectorStyle,
    HitElement,
    HoverState,
    SentenceConnectorOverlay,
    hits_from_selection,
)
from .scatter import ScatterPlotBuilder
from .tooltip import clean_label, format_tooltip, segment_label

__all__ = [
    "NO_SELECTION",
    "Connector",
    "ConnectorStyle",
    "HitElement",
    "HoverState",
    "SentenceConnectorOverlay",
    "hits_from_selection",
    "ScatterPlotBuilder",
    "clean_label",
    "format_tooltip",
    "segment_label",
]
