"""
Render module for page images and in-document highlighting.

Wraps the PyMuPDF rendering engine, maps matches onto the rendered
text layer and debounces highlight passes.
"""

from .models import Rect, TextFragment, TextLayer, Overlay, OverlayStyle
from .engine import RenderEngine, RenderedDocument, init_render_engine
from .mapper import HighlightMapper
from .scheduler import HighlightScheduler

__all__ = [
    "Rect",
    "TextFragment",
    "TextLayer",
    "Overlay",
    "OverlayStyle",
    "RenderEngine",
    "RenderedDocument",
    "init_render_engine",
    "HighlightMapper",
    "HighlightScheduler"
]
