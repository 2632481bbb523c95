"""
Main Streamlit application for PDFlyzer.

Entry point that assembles all components into the complete
web interface with upload, search, results, and PDF viewing.

Note: This file is run directly by Streamlit, so it needs to
set up the Python path before importing other modules.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports when run directly by Streamlit
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st  # noqa: E402

from pdflyzer.core import Notice, NoticeKind, get_config, get_logger, reload_config  # noqa: E402
from pdflyzer.render import init_render_engine  # noqa: E402
from pdflyzer.session import Workspace  # noqa: E402

from pdflyzer.gui.state import (  # noqa: E402
    init_state,
    get_state,
    get_workspace,
    get_scheduler,
    pop_notice,
    post_notice,
)
from pdflyzer.gui.components import (  # noqa: E402
    render_sidebar,
    render_search_bar,
    render_search_header,
    render_no_results,
    render_results,
    render_pdf_viewer,
)

logger = get_logger(__name__)


def render_notice(notice: Notice) -> None:
    """
    Display a notice with the Streamlit element matching its kind.

    Args:
        notice: Notice to display.
    """
    text = f"**{notice.title}**"
    if notice.description:
        text += f"  \n{notice.description}"

    if notice.kind is NoticeKind.SUCCESS:
        st.success(text)
    elif notice.kind is NoticeKind.ERROR:
        st.error(text)
    else:
        st.info(text)


def load_app_config():
    """
    Load the configuration named by a `--config` script argument, if any.

    Streamlit passes arguments given after `--` to the script.
    """
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--config", type=str)
    args, _ = parser.parse_known_args()

    if args.config and "config_loaded" not in st.session_state:
        reload_config(Path(args.config))
        st.session_state["config_loaded"] = True

    return get_config()


def main():
    """Main application entry point."""
    config = load_app_config()

    st.set_page_config(
        page_title=config.gui.page_title,
        page_icon="📄",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    init_state()

    init_render_engine()

    workspace = get_workspace()

    render_sidebar(workspace)

    st.title(config.gui.page_title)
    st.caption("Search your PDF documents and export the matches")

    notice = pop_notice()
    if notice:
        render_notice(notice)

    terms, submitted = render_search_bar(workspace)

    if submitted:
        _execute_search(workspace, terms)

    if not workspace.documents:
        _render_welcome()
        return

    results_col, viewer_col = st.columns([1, 1])

    with results_col:
        _render_results_section(workspace)

    with viewer_col:
        if get_state("show_pdf", False):
            render_pdf_viewer(workspace)


def _execute_search(workspace: Workspace, terms) -> None:
    """
    Run the search and queue its outcome notice.

    Args:
        workspace: Session workspace.
        terms: Terms from the search bar.
    """
    with st.spinner("Searching..."):
        notice = workspace.search(terms)

    get_scheduler().cancel()
    post_notice(notice)

    logger.info(f"Search {terms}: {notice.title}")

    st.rerun()


def _render_results_section(workspace: Workspace) -> None:
    """Render the search results section."""
    if not workspace.terms:
        st.caption("Add search terms and press Search.")
        return

    render_search_header(workspace)

    if not len(workspace.store):
        render_no_results(workspace)
        return

    st.divider()

    render_results(workspace)


def _render_welcome() -> None:
    """Render welcome message when no document is loaded."""
    st.markdown("""
    ### Welcome to PDFlyzer

    Upload one or more PDF files from the sidebar to get started.

    **Features:**
    - Case-insensitive search for several words or phrases at once
    - Matches shown with their surrounding context
    - Highlights drawn directly on the rendered page
    - Editable "next word" for each match
    - CSV export of the highlighted matches
    """)


if __name__ == "__main__":
    main()
