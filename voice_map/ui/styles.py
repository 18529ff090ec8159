"""
Theme constants and CSS injection for Voice-Map.
Centralizes all styling in one place for easy customization.
"""

import html

import streamlit as st
from dataclasses import dataclass

import config


@dataclass(frozen=True)
class Theme:
    """Central theme configuration - all colors in one place."""
    # Series palette
    active: str = config.ACTIVE_FILL_COLOR
    passive: str = config.PASSIVE_FILL_COLOR
    extension: str = config.EXTENSION_FILL_COLOR
    connector: str = config.CONNECTOR_COLOR

    # Text
    text_primary: str = "#263238"
    text_secondary: str = "#607d8b"

    # Backgrounds
    bg_card: str = "#fafafa"

    # Borders
    border_subtle: str = "#e0e0e0"


THEME = Theme()


def get_css() -> str:
    """Generate CSS using theme constants."""
    return f"""
<style>
    @import url('https://fonts.googleapis.com/css2?family=Alegreya:wght@400;700&display=swap');

    :root {{
        --vm-active: {THEME.active};
        --vm-passive: {THEME.passive};
        --vm-extension: {THEME.extension};
    }}

    /* Header styling */
    .vm-header {{
        font-family: "Alegreya", serif;
        color: {THEME.text_primary};
        font-size: 2.5rem;
        font-weight: 700;
        margin-bottom: 0;
    }}

    .vm-subheader {{
        color: {THEME.text_secondary};
        font-size: 1.1rem;
        margin-top: 0.25rem;
    }}

    /* Pair detail card */
    .vm-card {{
        background: {THEME.bg_card};
        border: 1px solid {THEME.border_subtle};
        border-radius: 12px;
        padding: 1.25rem;
        margin: 1rem 0;
        font-family: "Alegreya", serif;
    }}

    .vm-card-active {{
        border-left: 4px solid var(--vm-active);
        padding-left: 0.75rem;
        margin-bottom: 0.75rem;
    }}

    .vm-card-passive {{
        border-left: 4px solid var(--vm-passive);
        padding-left: 0.75rem;
    }}

    .vm-card-extension {{
        color: var(--vm-extension);
        font-size: 0.85rem;
        font-weight: 600;
    }}

    /* Distance badge */
    .vm-badge {{
        background: {THEME.connector};
        color: white;
        padding: 0.25rem 0.75rem;
        border-radius: 20px;
        font-size: 0.8rem;
        font-weight: 600;
        display: inline-block;
    }}

    /* Error message styling */
    .vm-error {{
        background: rgba(239, 68, 68, 0.1);
        border: 1px solid rgba(239, 68, 68, 0.3);
        border-radius: 8px;
        padding: 1rem;
        color: #b91c1c;
        margin: 0.5rem 0;
        font-size: 0.9rem;
    }}
</style>
"""


def inject_styles() -> None:
    """Inject CSS styles into the Streamlit app."""
    st.markdown(get_css(), unsafe_allow_html=True)


def render_header() -> None:
    """Render the styled application header."""
    st.markdown('<h1 class="vm-header">Voice-Map</h1>', unsafe_allow_html=True)
    st.markdown(
        '<p class="vm-subheader">Active and passive sentences in embedding space</p>',
        unsafe_allow_html=True
    )


def render_error(message: str) -> None:
    """Render a styled error message."""
    st.markdown(f'<div class="vm-error">{html.escape(message)}</div>', unsafe_allow_html=True)
