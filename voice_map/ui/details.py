"""Sentence pair details panel components."""

import html
import math

import streamlit as st

from voice_map.core.series import SeriesPair
from voice_map.visualization.overlay import HoverState
from voice_map.visualization.tooltip import clean_label


def pair_distance(pair: SeriesPair, index: int) -> float:
    """Euclidean distance between the active and passive points at ``index``."""
    active = pair.active[index]
    passive = pair.passive[index]
    return math.hypot(passive.x - active.x, passive.y - active.y)


def render_pair_details(pair: SeriesPair, state: HoverState, base_count: int) -> None:
    """Render the selected pair, or a short guide when nothing is selected."""
    if not state.is_selected or not 0 <= state.index < len(pair):
        render_getting_started()
        return

    index = state.index
    distance = pair_distance(pair, index)
    distance_text = "n/a" if math.isnan(distance) else f"{distance:.3f}"
    extension_note = (
        "<div class='vm-card-extension'>Your sentences</div>"
        if index >= base_count else ""
    )

    st.markdown("### Selected Pair")
    st.markdown(f"""
    <div class="vm-card">
        {extension_note}
        <div class="vm-card-active"><b>Active:</b> {html.escape(clean_label(pair.active[index].label))}</div>
        <div class="vm-card-passive"><b>Passive:</b> {html.escape(clean_label(pair.passive[index].label))}</div>
    </div>
    """, unsafe_allow_html=True)
    st.markdown(
        f"Distance <span class='vm-badge'>{distance_text}</span>",
        unsafe_allow_html=True
    )


def render_getting_started() -> None:
    """Render getting started guide."""
    st.markdown("""
    ### Getting Started

    **Explore:** Hover over a point to read its sentence

    **Compare:** Click a point to connect its active and passive phrasings

    **Try your own:** Enter a sentence pair in the sidebar to plot it in the same space
    """)
