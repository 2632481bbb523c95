"""
Reusable UI components for the Streamlit application.

Contains modular components for the sidebar, search bar,
results display, and PDF viewer.
"""

from .sidebar import render_sidebar
from .search_bar import render_search_bar, render_search_header, render_no_results
from .results_list import render_results
from .pdf_viewer import render_pdf_viewer

__all__ = [
    "render_sidebar",
    "render_search_bar",
    "render_search_header",
    "render_no_results",
    "render_results",
    "render_pdf_viewer"
]
