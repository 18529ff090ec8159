"""
Voice-Map: Active vs. Passive Sentence Embeddings
Main Streamlit application.

Run with: streamlit run app.py
"""

import logging

import pandas as pd
import streamlit as st

from voice_map.core.extender import RemoteExtender
from voice_map.core.reshaper import reshape
from voice_map.embedders.base import get_embedder
from voice_map.loaders.base import get_loader
from voice_map.ui import AppState, init_session_state, inject_styles, render_header
from voice_map.ui.details import render_pair_details
from voice_map.ui.docs import render_about_tab
from voice_map.ui.main_view import extend_with_query, render_error_banner, render_visualization
from voice_map.ui.sidebar import render_sidebar
from voice_map.ui.styles import render_error
import config

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Page Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="Voice-Map",
    page_icon="🔀",
    layout="wide",
    initial_sidebar_state="expanded"
)

init_session_state()


# -----------------------------------------------------------------------------
# Data Loading - Cached to survive reruns
# -----------------------------------------------------------------------------

@st.cache_data(show_spinner=False)
def load_records() -> pd.DataFrame:
    """Load the sentence records once per process."""
    return get_loader("embeddings").load()


@st.cache_resource(show_spinner=False)
def get_extender() -> RemoteExtender:
    """Shared extender; its single worker keeps one lookup in flight."""
    return RemoteExtender(get_embedder("remote"))


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main():
    inject_styles()
    render_header()

    try:
        records = load_records()
    except (FileNotFoundError, ValueError) as e:
        logger.exception("Loading sentence records failed")
        render_error(str(e))
        st.stop()

    base_pair = reshape(records, limit=config.ROW_LIMIT)
    pair = extend_with_query(base_pair, get_extender())

    render_sidebar(pair, base_count=len(base_pair))

    tab_explore, tab_about = st.tabs(["🔍 Explore", "📚 About"])

    with tab_explore:
        render_error_banner()

        col_viz, col_details = st.columns([3, 1])

        with col_viz:
            render_visualization(pair)

        with col_details:
            render_pair_details(pair, AppState.hover_state(), base_count=len(base_pair))

    with tab_about:
        render_about_tab()


if __name__ == "__main__":
    main()
