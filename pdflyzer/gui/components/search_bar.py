"""
Search bar component for PDFlyzer.

Builds the list of search terms and triggers the search.
"""

import streamlit as st
from typing import List, Tuple

from ...search import add_term, normalize_terms, remove_term
from ...session import Workspace
from ..state import get_state, set_state


def render_search_bar(workspace: Workspace) -> Tuple[List[str], bool]:
    """
    Render the term input, the term chips and the search button.

    Returns:
        Tuple of (terms, was_submitted).
    """
    terms = get_state("pending_terms", [])

    with st.form("term_form", clear_on_submit=True):
        col1, col2 = st.columns([5, 1])

        with col1:
            candidate = st.text_input(
                "Search term",
                placeholder="Add a word or phrase (commas separate terms)...",
                label_visibility="collapsed"
            )

        with col2:
            added = st.form_submit_button("Add", use_container_width=True)

    if added and candidate.strip():
        for term in normalize_terms(candidate):
            terms = add_term(terms, term)
        set_state("pending_terms", terms)

    _render_term_chips(terms)

    submitted = st.button(
        "Search",
        type="primary",
        disabled=not terms or not workspace.documents
    )

    return terms, submitted


def _render_term_chips(terms: List[str]) -> None:
    """One removable chip per term."""
    if not terms:
        st.caption("No search terms yet.")
        return

    columns = st.columns(min(len(terms), 6))

    for idx, term in enumerate(terms):
        with columns[idx % len(columns)]:
            if st.button(f"✕ {term}", key=f"remove_term_{idx}_{term}"):
                set_state("pending_terms", remove_term(terms, term))
                st.rerun()


def render_search_header(workspace: Workspace) -> None:
    """Summary line above the results."""
    if not workspace.terms:
        return

    col1, col2 = st.columns([2, 3])

    with col1:
        st.markdown(f"**{len(workspace.store):,}** matches")

    with col2:
        st.caption("Terms: " + ", ".join(f'"{t}"' for t in workspace.terms))


def render_no_results(workspace: Workspace) -> None:
    """Display no results message with suggestions."""
    st.info("No matches for " + ", ".join(f'"{t}"' for t in workspace.terms))

    with st.expander("Suggestions"):
        st.markdown("""
        - Check the spelling
        - Try shorter terms: a phrase must appear exactly as typed
        - Scanned PDFs have no text layer and cannot be searched
        """)
