"""
Results list component for displaying matches.

Renders matches grouped by term, each with its context, a highlight
toggle, next-word editing and a jump to the page.
"""

import html

import streamlit as st

from ...core import get_config
from ...results import group_by_term
from ...search import AnnotatedMatch
from ...session import Workspace
from ...utils import truncate_text
from ..state import set_state


def render_results(workspace: Workspace) -> None:
    """
    Render the visible matches, grouped by term.

    Args:
        workspace: Session workspace.
    """
    matches = workspace.visible_matches()

    if not matches:
        st.caption("No matches in the selected file.")
        return

    for term, group in group_by_term(matches).items():
        st.markdown(f"#### {html.escape(term)} ({len(group)})")

        for match in group:
            _render_match_card(workspace, match)


def _render_match_card(workspace: Workspace, match: AnnotatedMatch) -> None:
    """Render a single match with expander."""
    preview_chars = get_config().gui.results_preview_chars
    header = f"**{match.file_name}** - Page {match.page_number}: {truncate_text(match.full_context, preview_chars)}"

    with st.expander(header, expanded=False):
        st.markdown(_format_snippet(match), unsafe_allow_html=True)

        next_word = match.next_word or "-"
        suffix = " (edited)" if match.next_word_edited else ""
        st.caption(f"Next word: {next_word}{suffix}")

        _render_actions(workspace, match)


def _format_snippet(match: AnnotatedMatch) -> str:
    """Context with the matched text in bold."""
    before = html.escape(match.before_context)
    matched = html.escape(match.matched_text)
    after = html.escape(match.after_context)
    return f"...{before} <mark><b>{matched}</b></mark> {after}..."


def _render_actions(workspace: Workspace, match: AnnotatedMatch) -> None:
    """Render action controls for a match."""
    key_suffix = f"{workspace.batch}_{match.id}"

    col1, col2, col3 = st.columns(3)

    with col1:
        st.checkbox(
            "Highlight",
            value=match.is_highlighted,
            key=f"highlight_{key_suffix}",
            on_change=_on_highlight_change,
            args=(workspace, match.id, f"highlight_{key_suffix}")
        )

    with col2:
        if st.button("Edit next word", key=f"edit_btn_{key_suffix}", use_container_width=True):
            workspace.go_to_match(match.id)
            workspace.selection.begin(match.id)
            set_state("show_pdf", True)
            st.rerun()

    with col3:
        if st.button("Show in PDF", key=f"pdf_btn_{key_suffix}", use_container_width=True):
            workspace.go_to_match(match.id)
            set_state("show_pdf", True)
            st.rerun()


def _on_highlight_change(workspace: Workspace, match_id: str, widget_key: str) -> None:
    workspace.store.set_highlight(match_id, st.session_state[widget_key])
