"""
Rendering engine client backed by PyMuPDF.

Renders pages to PNG and exposes each page's text layer as positioned
fragments. PyMuPDF's process-wide options are set once, before the
first document is opened.
"""

from typing import List

import fitz

from ..core import get_logger, RenderError
from .models import Rect, TextFragment, TextLayer

logger = get_logger(__name__)


_engine_initialized = False

TEXT_BLOCK = 0


def init_render_engine() -> None:
    """
    Apply PyMuPDF global settings. Safe to call repeatedly.

    Small glyph heights give tighter boxes around each character,
    which keeps highlight overlays to the height of the text line.
    """
    global _engine_initialized

    if _engine_initialized:
        return

    fitz.TOOLS.set_small_glyph_heights(True)
    fitz.TOOLS.mupdf_display_errors(False)

    logger.debug(f"PyMuPDF {fitz.VersionBind} initialized")

    _engine_initialized = True


class RenderedDocument:
    """
    An open PDF in the rendering engine.

    Use as a context manager, or call close() when done.
    """

    def __init__(self, pdf: "fitz.Document", file_index: int = 0, file_name: str = None):
        self._pdf = pdf
        self.file_index = file_index
        self.file_name = file_name or "<memory>"

    def __enter__(self) -> "RenderedDocument":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def page_count(self) -> int:
        return self._pdf.page_count

    def close(self) -> None:
        self._pdf.close()

    def render_page(self, page_number: int, scale: float = 1.0) -> bytes:
        """
        Render a page to PNG.

        Args:
            page_number: Page number (1-indexed).
            scale: Zoom factor.

        Returns:
            PNG image bytes.
        """
        page = self._page(page_number)
        pixmap = page.get_pixmap(matrix=fitz.Matrix(scale, scale))
        return pixmap.tobytes("png")

    def text_layer(self, page_number: int, scale: float = 1.0) -> TextLayer:
        """
        Build the positioned text layer of a page.

        One fragment per text span, with per-character boxes, in the
        same pixel space as render_page at the same scale.

        Args:
            page_number: Page number (1-indexed).
            scale: Zoom factor.

        Returns:
            A ready TextLayer.
        """
        page = self._page(page_number)
        matrix = page.rotation_matrix * fitz.Matrix(scale, scale)
        fragments = []

        raw = page.get_text("rawdict")

        for block in raw.get("blocks", []):
            if block.get("type") != TEXT_BLOCK:
                continue

            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    fragment = _span_to_fragment(span, matrix)
                    if fragment is not None:
                        fragments.append(fragment)

        bounds = page.rect * fitz.Matrix(scale, scale)

        logger.debug(
            f"{self.file_name} page {page_number}: {len(fragments)} fragments at scale {scale}"
        )

        return TextLayer(
            file_index=self.file_index,
            page_number=page_number,
            fragments=tuple(fragments),
            width=bounds.width,
            height=bounds.height,
            scale=scale,
            ready=True
        )

    def page_words(self, page_number: int) -> List[str]:
        """Words of a page in reading order, for picking a next word."""
        page = self._page(page_number)
        return [word[4] for word in page.get_text("words", sort=True)]

    def _page(self, page_number: int) -> "fitz.Page":
        if page_number < 1 or page_number > self._pdf.page_count:
            raise RenderError(
                f"Page {page_number} out of range ({self._pdf.page_count} pages)",
                page_number=page_number,
                details={"file": self.file_name}
            )
        return self._pdf[page_number - 1]


class RenderEngine:
    """Opens PDF bytes for rendering."""

    def __init__(self):
        init_render_engine()

    def open(self, data: bytes, file_index: int = 0, file_name: str = None) -> RenderedDocument:
        """
        Open a PDF from memory.

        Raises:
            RenderError: If the bytes cannot be opened as a PDF.
        """
        try:
            pdf = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise RenderError(
                f"Cannot open PDF for rendering: {e}",
                details={"file": file_name}
            )

        return RenderedDocument(pdf, file_index=file_index, file_name=file_name)


def _span_to_fragment(span: dict, matrix: "fitz.Matrix"):
    """Convert a rawdict span into a TextFragment, or None if it has no text."""
    chars = span.get("chars", [])
    text = "".join(char["c"] for char in chars)

    if not text.strip():
        return None

    boxes = []
    for char in chars:
        box = fitz.Rect(char["bbox"]) * matrix
        boxes.append(Rect(box.x0, box.y0, box.x1, box.y1))

    box = fitz.Rect(span["bbox"]) * matrix

    return TextFragment(
        text=text,
        rect=Rect(box.x0, box.y0, box.x1, box.y1),
        char_boxes=tuple(boxes)
    )


if __name__ == "__main__":
    import sys
    from pathlib import Path

    if len(sys.argv) < 2:
        print("Usage: python -m pdflyzer.render.engine <pdf_file>")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])

    with RenderEngine().open(pdf_path.read_bytes(), file_name=pdf_path.name) as doc:
        layer = doc.text_layer(1, scale=1.2)
        print(f"{doc.page_count} pages; page 1 has {len(layer.fragments)} fragments")
        for fragment in layer.fragments[:10]:
            print(f"  {fragment.rect} {fragment.text!r}")
