"""Sidebar UI components for Voice-Map."""

import logging
from typing import Optional

import streamlit as st

from voice_map.core.series import SeriesPair
from voice_map.ui.state import AppState
import config

logger = logging.getLogger(__name__)


def read_query_pair() -> Optional[tuple[str, str]]:
    """Return the (active, passive) query parameters if both are present."""
    active = st.query_params.get(config.QUERY_PARAM_ACTIVE)
    passive = st.query_params.get(config.QUERY_PARAM_PASSIVE)
    if active is None or passive is None:
        return None
    return active, passive


def render_sidebar(pair: SeriesPair, base_count: int) -> None:
    """Render the complete sidebar."""
    with st.sidebar:
        render_lookup_form()
        st.markdown("---")
        render_dataset_info(pair, base_count)
        st.markdown("---")
        render_legend_help()


def render_lookup_form() -> None:
    """Render the sentence pair form, pre-filled from the query parameters."""
    st.markdown("### Try Your Own Sentences")

    current = read_query_pair() or ("", "")

    with st.form("lookup_form"):
        active = st.text_input(
            "Active sentence",
            value=current[0],
            placeholder="The cat chased the mouse.",
        )
        passive = st.text_input(
            "Passive sentence",
            value=current[1],
            placeholder="The mouse was chased by the cat.",
        )
        submitted = st.form_submit_button("Plot", type="primary", width="stretch")

    if submitted:
        if not active.strip() or not passive.strip():
            st.warning("Enter both an active and a passive sentence.")
            return
        if (active, passive) != current:
            logger.info("Sentence pair submitted")
            st.query_params[config.QUERY_PARAM_ACTIVE] = active
            st.query_params[config.QUERY_PARAM_PASSIVE] = passive
            AppState.reset_for_query_change()
            st.rerun()

    if read_query_pair() is not None:
        if st.button("Clear", width="stretch"):
            st.query_params.clear()
            AppState.reset_for_query_change()
            st.rerun()


def render_dataset_info(pair: SeriesPair, base_count: int) -> None:
    """Render dataset info section."""
    st.markdown("### Dataset Info")
    st.markdown(f"**Sentence pairs:** {base_count:,}")
    if len(pair) > base_count:
        st.markdown("**Your pair:** plotted in highlight color")


def render_legend_help() -> None:
    """Explain the marker colors."""
    st.markdown("### Colors")
    st.markdown(
        f"<span style='color:{config.ACTIVE_FILL_COLOR}'>●</span> Active &nbsp; "
        f"<span style='color:{config.PASSIVE_FILL_COLOR}'>●</span> Passive &nbsp; "
        f"<span style='color:{config.EXTENSION_FILL_COLOR}'>●</span> Your sentences",
        unsafe_allow_html=True
    )
    st.caption("Click a point to connect its active and passive phrasings.")
