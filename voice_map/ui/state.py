"""
Centralized session state management for Voice-Map.
Provides typed accessors and clear state transition methods.
"""

from dataclasses import dataclass, field
from typing import Optional

import streamlit as st

from voice_map.core.extender import ExtensionOutcome
from voice_map.visualization.overlay import NO_SELECTION, HoverState


@dataclass
class StateDefaults:
    """Default values for all session state variables."""
    hover_state: HoverState = field(default_factory=lambda: NO_SELECTION)
    extension_outcome: Optional[ExtensionOutcome] = None
    last_error: Optional[str] = None


class AppState:
    """
    Wrapper around Streamlit session state with type hints and defaults.
    Provides clear API for state transitions.
    """

    @classmethod
    def init(cls) -> None:
        """Initialize all session state with defaults."""
        defaults = StateDefaults()
        for field_name in defaults.__dataclass_fields__:
            if field_name not in st.session_state:
                st.session_state[field_name] = getattr(defaults, field_name)

    @classmethod
    def reset_for_query_change(cls) -> None:
        """Clear transient state when the looked-up sentence pair changes."""
        st.session_state.hover_state = NO_SELECTION
        st.session_state.extension_outcome = None
        st.session_state.last_error = None

    @staticmethod
    def hover_state() -> HoverState:
        return st.session_state.get("hover_state", NO_SELECTION)

    @classmethod
    def set_hover_state(cls, state: HoverState) -> None:
        st.session_state.hover_state = state

    @staticmethod
    def extension_for(active: str, passive: str) -> Optional[ExtensionOutcome]:
        """Return the stored lookup outcome if it belongs to this sentence pair."""
        outcome = st.session_state.get("extension_outcome")
        if outcome is None:
            return None
        if outcome.active != active or outcome.passive != passive:
            return None
        return outcome

    @classmethod
    def set_extension(cls, outcome: ExtensionOutcome) -> None:
        """Record a lookup outcome and mirror its error, if any."""
        st.session_state.extension_outcome = outcome
        st.session_state.last_error = outcome.error

    @staticmethod
    def has_error() -> bool:
        """Check if there's an error to display."""
        return st.session_state.get("last_error") is not None


def init_session_state() -> None:
    """Convenience function to initialize session state."""
    AppState.init()
