"""
PDF viewer component with in-page highlighting.

Renders the active page as an image and positions one overlay box per
highlighted occurrence on top of it:
- match color for the matched text
- next-word color for the word that follows it
Also hosts the page and zoom controls and the next-word selection panel.
"""

import base64
import html
from typing import List, Optional

import streamlit as st

from ...annotation import SelectionMode
from ...core import RenderError, get_config, get_logger
from ...render import Overlay, OverlayStyle, RenderEngine, TextLayer
from ...session import Workspace
from ..state import get_scheduler, set_state

logger = get_logger(__name__)


# Upper bound on how long a run waits for its highlight pass
HIGHLIGHT_WAIT_SECONDS = 2.0


def render_pdf_viewer(workspace: Workspace) -> None:
    """
    Render the active page of the active document.

    Args:
        workspace: Session workspace.
    """
    document = workspace.active_document
    if document is None:
        return

    viewer = workspace.viewer

    col1, col2 = st.columns([3, 1])

    with col1:
        st.subheader(f"PDF viewer: {document.file_name}")

    with col2:
        if st.button("Close", key="close_pdf"):
            workspace.selection.reset()
            get_scheduler().cancel()
            set_state("show_pdf", False)
            st.rerun()

    _render_controls(workspace)

    try:
        with RenderEngine().open(document.data, document.file_index, document.file_name) as rendered:
            image = rendered.render_page(viewer.page_number, viewer.scale)
            layer = rendered.text_layer(viewer.page_number, viewer.scale)
            words = rendered.page_words(viewer.page_number) if workspace.selection.is_active else []

    except RenderError as e:
        logger.error(f"Cannot render {document.file_name}: {e.message}")
        st.error(f"Unable to display the page: {e.message}")
        return

    overlays = _highlight(layer, workspace)

    st.markdown(_page_html(image, layer, overlays), unsafe_allow_html=True)

    if workspace.selection.is_active:
        _render_selection_panel(workspace, words)


def _highlight(layer: TextLayer, workspace: Workspace) -> List[Overlay]:
    """Run a debounced highlight pass for the current page."""
    scheduler = get_scheduler()
    ticket = scheduler.request(layer, workspace.page_matches())
    overlays = scheduler.wait(ticket, timeout=HIGHLIGHT_WAIT_SECONDS)

    if overlays is None:
        logger.debug(f"Highlight pass {ticket} did not complete, keeping previous overlays")
        return scheduler.mapper.overlays_for(layer.file_index, layer.page_number)

    return overlays


def _page_html(image: bytes, layer: TextLayer, overlays: List[Overlay]) -> str:
    """Page image with absolutely positioned overlay boxes."""
    config = get_config().render
    colors = {
        OverlayStyle.MATCH: config.match_color,
        OverlayStyle.NEXT_WORD: config.next_word_color
    }

    image_data = base64.b64encode(image).decode("utf-8")

    boxes = []
    for overlay in overlays:
        rect = overlay.rect
        boxes.append(
            f'<div title="{html.escape(overlay.match_id)}" style="position:absolute;'
            f"left:{rect.x0:.1f}px;top:{rect.y0:.1f}px;"
            f"width:{rect.width:.1f}px;height:{rect.height:.1f}px;"
            f'background:{colors[overlay.style]};border-radius:2px;"></div>'
        )

    return f"""
    <div style="overflow:auto;max-width:100%;border:1px solid #ccc;border-radius:4px;">
        <div style="position:relative;width:{layer.width:.0f}px;height:{layer.height:.0f}px;">
            <img src="data:image/png;base64,{image_data}"
                 style="position:absolute;left:0;top:0;width:{layer.width:.0f}px;height:{layer.height:.0f}px;">
            {"".join(boxes)}
        </div>
    </div>
    """


def _render_controls(workspace: Workspace) -> None:
    """Page navigation and zoom buttons."""
    viewer = workspace.viewer

    col1, col2, col3, col4, col5, col6 = st.columns([1, 1, 2, 1, 1, 1])

    with col1:
        if st.button("Prev.", key="prev_page", disabled=viewer.page_number <= 1):
            workspace.prev_page()
            st.rerun()

    with col2:
        if st.button("Next", key="next_page", disabled=viewer.page_number >= viewer.page_count):
            workspace.next_page()
            st.rerun()

    with col3:
        st.markdown(
            f"<div style='text-align:center'>Page {viewer.page_number} of {viewer.page_count}</div>",
            unsafe_allow_html=True
        )

    with col4:
        if st.button("−", key="zoom_out", disabled=viewer.scale <= viewer.min_scale):
            workspace.zoom_out()
            st.rerun()

    with col5:
        st.markdown(
            f"<div style='text-align:center'>{viewer.scale:.0%}</div>",
            unsafe_allow_html=True
        )

    with col6:
        if st.button("+", key="zoom_in", disabled=viewer.scale >= viewer.max_scale):
            workspace.zoom_in()
            st.rerun()


def _render_selection_panel(workspace: Workspace, words: List[str]) -> None:
    """
    Let the user pick the next word of the match being edited.

    The word can be chosen from the words of the displayed page or typed.
    """
    selection = workspace.selection
    match = workspace.store.get(selection.match_id)

    if match is None:
        selection.reset()
        return

    st.info(
        f'Select the word following "{match.matched_text}" '
        f"(currently: {match.next_word or '-'})"
    )

    key_suffix = f"{workspace.batch}_{match.id}"

    picked: Optional[str] = st.selectbox(
        "Word on this page",
        options=[""] + words,
        key=f"word_pick_{key_suffix}"
    )
    typed = st.text_input("Or type it", key=f"word_typed_{key_suffix}")

    text = typed.strip() or (picked or "")
    if text:
        selection.capture(text)

    col1, col2 = st.columns(2)

    with col1:
        if st.button(
            "Save",
            key=f"word_save_{key_suffix}",
            type="primary",
            disabled=selection.mode is not SelectionMode.HAS_SELECTION
        ):
            selection.commit(workspace.store)
            st.rerun()

    with col2:
        if st.button("Cancel", key=f"word_cancel_{key_suffix}"):
            selection.cancel()
            st.rerun()
