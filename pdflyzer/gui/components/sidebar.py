"""
Sidebar component for PDFlyzer.

Hosts the PDF uploader, the file selector, document statistics
and the CSV export.
"""

import streamlit as st

from ...core import get_config
from ...session import Workspace
from ..state import clear_search_state, get_state, post_notice, set_state


def render_sidebar(workspace: Workspace) -> None:
    """
    Render the sidebar.

    Args:
        workspace: Session workspace.
    """
    config = get_config()

    with st.sidebar:
        st.title(config.gui.page_title)

        st.subheader("Documents")
        _render_uploader(workspace)

        if workspace.documents:
            st.divider()
            _render_file_selector(workspace)
            _render_statistics(workspace)

        st.divider()

        st.subheader("Export")
        _render_export(workspace)

        st.divider()

        _render_help()


def _render_uploader(workspace: Workspace) -> None:
    """File uploader; extraction runs once per new set of files."""
    config = get_config()

    uploaded = st.file_uploader(
        "Upload PDF files",
        type=[ext.lstrip(".") for ext in config.extraction.supported_extensions],
        accept_multiple_files=config.gui.multi_file,
        key="pdf_uploader"
    )

    if uploaded is None:
        return

    files = uploaded if isinstance(uploaded, list) else [uploaded]
    if not files:
        return

    signature = tuple((f.name, f.size) for f in files)
    if signature == get_state("upload_signature"):
        return

    set_state("upload_signature", signature)

    progress = st.progress(0.0)

    def on_progress(current: int, total: int, file_name: str) -> None:
        progress.progress(current / total, text=f"Reading {file_name} ({current}/{total})")

    with st.spinner("Extracting text..."):
        notice = workspace.load_files(files, progress_callback=on_progress)

    progress.empty()

    if not notice.is_error:
        clear_search_state()

    post_notice(notice)
    st.rerun()


def _render_file_selector(workspace: Workspace) -> None:
    """Restrict results to one file, or show all of them."""
    options = [None] + [doc.file_index for doc in workspace.documents]
    names = {doc.file_index: doc.file_name for doc in workspace.documents}

    selected = st.selectbox(
        "Show results for",
        options=options,
        index=options.index(workspace.file_filter),
        format_func=lambda i: "All files" if i is None else names[i]
    )

    if selected != workspace.file_filter:
        workspace.set_file_filter(selected)
        st.rerun()


def _render_statistics(workspace: Workspace) -> None:
    """Display document and match counts."""
    col1, col2 = st.columns(2)

    with col1:
        st.metric("Files", f"{len(workspace.documents):,}")

    with col2:
        total_pages = sum(doc.page_count for doc in workspace.documents)
        st.metric("Pages", f"{total_pages:,}")

    if workspace.terms:
        st.caption(f"{len(workspace.store):,} matches for {len(workspace.terms)} term(s)")


def _render_export(workspace: Workspace) -> None:
    """Download button for highlighted matches."""
    content, file_name, notice = workspace.export()

    if content is None:
        st.caption(notice.description)
        return

    clicked = st.download_button(
        label="Export to CSV",
        data=content,
        file_name=file_name,
        mime="text/csv",
        use_container_width=True,
        key="export_csv"
    )

    if clicked:
        st.success(notice.description)


def _render_help() -> None:
    """Display usage help."""
    with st.expander("Help"):
        st.markdown("""
        **Searching:**
        - Add one or more words or phrases, then press *Search*
        - Matching is case-insensitive and literal
        - Separate several terms with commas

        **Results:**
        - Untick *Highlight* to leave a match out of the viewer and the export
        - *Edit next word* lets you pick the word that follows a match from the page
        - *Show in PDF* opens the page holding the match
        """)
