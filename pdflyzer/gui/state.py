"""
Streamlit session state management.

Provides helpers for initializing, reading, and updating
session state values used across the application. The Workspace
and the highlight scheduler live in session state so they survive reruns.
"""

import streamlit as st
from typing import Any, Dict, Optional

from ..core import Notice, get_config
from ..render import HighlightScheduler
from ..session import Workspace


DEFAULT_STATE = {
    "pending_terms": [],
    "notice": None,
    "upload_signature": None,
    "show_pdf": False,
}


def init_state() -> None:
    """
    Initialize session state with default values.

    Only sets values that don't already exist, preserving
    state across reruns.
    """
    for key, default_value in DEFAULT_STATE.items():
        if key not in st.session_state:
            st.session_state[key] = default_value


def get_state(key: str, default: Any = None) -> Any:
    """
    Get a value from session state.

    Args:
        key: State key to retrieve.
        default: Default value if key doesn't exist.

    Returns:
        The stored value or default.
    """
    return st.session_state.get(key, default)


def set_state(key: str, value: Any) -> None:
    st.session_state[key] = value


def update_state(updates: Dict[str, Any]) -> None:
    """
    Update multiple state values at once.

    Args:
        updates: Dictionary of key-value pairs to update.
    """
    for key, value in updates.items():
        st.session_state[key] = value


def get_workspace() -> Workspace:
    """Return the session's Workspace, creating it on first use."""
    if "workspace" not in st.session_state:
        st.session_state["workspace"] = Workspace()
    return st.session_state["workspace"]


def get_scheduler() -> HighlightScheduler:
    """Return the session's highlight scheduler, creating it on first use."""
    if "scheduler" not in st.session_state:
        delay = get_config().render.highlight_delay_ms / 1000.0
        st.session_state["scheduler"] = HighlightScheduler(delay=delay)
    return st.session_state["scheduler"]


def post_notice(notice: Optional[Notice]) -> None:
    """Queue a notice for display at the top of the next run."""
    set_state("notice", notice)


def pop_notice() -> Optional[Notice]:
    notice = get_state("notice")
    set_state("notice", None)
    return notice


def clear_search_state() -> None:
    """Reset search-related state after a new upload."""
    update_state({
        "pending_terms": [],
        "show_pdf": False,
    })
