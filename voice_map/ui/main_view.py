"""Main view UI components (live lookup and visualization)."""

import logging

import streamlit as st

from voice_map.core.extender import RemoteExtender, apply_outcome
from voice_map.core.series import SeriesPair
from voice_map.ui.sidebar import read_query_pair
from voice_map.ui.state import AppState
from voice_map.ui.styles import render_error
from voice_map.visualization.overlay import (
    ConnectorStyle,
    SentenceConnectorOverlay,
    hits_from_selection,
)
from voice_map.visualization.scatter import ScatterPlotBuilder
import config

logger = logging.getLogger(__name__)


def extend_with_query(pair: SeriesPair, extender: RemoteExtender) -> SeriesPair:
    """
    Extend the series with the query parameter sentences, if any.

    The lookup runs once per sentence pair per session; later reruns reuse
    the stored outcome. A failed lookup leaves the series unchanged and
    records an error for the banner.
    """
    query = read_query_pair()
    if query is None:
        return pair

    active, passive = query
    outcome = AppState.extension_for(active, passive)
    if outcome is not None:
        return apply_outcome(pair, outcome)

    with st.spinner("Embedding your sentences..."):
        extended, outcome = extender.extend_async(pair, active, passive).result()
    # Session state belongs to the script thread, not the lookup worker
    AppState.set_extension(outcome)
    return extended


def render_error_banner() -> None:
    """Show the last recorded error, if any."""
    if AppState.has_error():
        render_error(f"Could not embed your sentences: {st.session_state.last_error}")


def make_overlay() -> SentenceConnectorOverlay:
    """Overlay configured with the connector style from config."""
    return SentenceConnectorOverlay(ConnectorStyle.from_config())


def on_chart_select() -> None:
    """Feed a chart selection event to the overlay and store the new state."""
    selection = st.session_state.get(config.CHART_KEY)
    state = make_overlay().handle_event(AppState.hover_state(), hits_from_selection(selection))
    AppState.set_hover_state(state)


def render_visualization(pair: SeriesPair) -> None:
    """Render the active/passive scatter plot with the pair connector."""
    builder = ScatterPlotBuilder()

    # Only chart selection events change the state, through on_chart_select
    fig = builder.render(pair, make_overlay(), AppState.hover_state())

    st.plotly_chart(
        fig,
        width="stretch",
        key=config.CHART_KEY,
        on_select=on_chart_select,
        selection_mode="points",
    )
