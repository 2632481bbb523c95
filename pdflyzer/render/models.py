"""
Geometry models for rendered text layers and highlight overlays.

All coordinates are in rendered pixels with the page's top-left
corner as origin.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle."""
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0


@dataclass(frozen=True)
class TextFragment:
    """
    A positioned run of text from the rendering engine.

    Fragment boundaries follow the engine's layout, not words or matches.

    Attributes:
        text: Fragment text.
        rect: Bounding box of the whole fragment.
        char_boxes: Optional box per character of text.
    """
    text: str
    rect: Rect
    char_boxes: Tuple[Rect, ...] = ()

    def sub_rect(self, start: int, end: int) -> Rect:
        """
        Rectangle covering characters [start, end) of this fragment.

        Uses the union of the per-character boxes when they line up
        with the text, otherwise interpolates along the fragment's
        longer side (vertical runs on rotated pages run top to bottom).
        """
        length = len(self.text)
        start = max(0, min(start, length))
        end = max(start, min(end, length))

        if len(self.char_boxes) == length and end > start:
            boxes = self.char_boxes[start:end]
            return Rect(
                min(box.x0 for box in boxes),
                min(box.y0 for box in boxes),
                max(box.x1 for box in boxes),
                max(box.y1 for box in boxes)
            )

        rect = self.rect
        if not length:
            return Rect(rect.x0, rect.y0, rect.x0, rect.y1)

        if rect.height > rect.width:
            y0 = rect.y0 + rect.height * start / length
            y1 = rect.y0 + rect.height * end / length
            return Rect(rect.x0, y0, rect.x1, y1)

        x0 = rect.x0 + rect.width * start / length
        x1 = rect.x0 + rect.width * end / length
        return Rect(x0, rect.y0, x1, rect.y1)


@dataclass(frozen=True)
class TextLayer:
    """
    Text layer of one rendered page.

    Attributes:
        file_index: Document the page belongs to.
        page_number: Page number (1-indexed).
        fragments: Positioned fragments in engine order.
        width: Rendered page width in pixels.
        height: Rendered page height in pixels.
        scale: Zoom factor used for rendering.
        ready: False while the engine is still laying out fragments.
    """
    file_index: int
    page_number: int
    fragments: Tuple[TextFragment, ...] = ()
    width: float = 0.0
    height: float = 0.0
    scale: float = 1.0
    ready: bool = True


class OverlayStyle(Enum):
    """Visual styles for highlight overlays."""
    MATCH = "match"
    NEXT_WORD = "next_word"


@dataclass(frozen=True)
class Overlay:
    """
    A highlight box painted on top of a rendered page.

    Attributes:
        rect: Box position relative to the page origin.
        style: MATCH for the matched text, NEXT_WORD for an edited next word.
        match_id: Match that produced the overlay.
        fragment_index: Index of the fragment in the text layer.
        start: First character of the fragment covered.
        end: One past the last character covered.
    """
    rect: Rect
    style: OverlayStyle
    match_id: str
    fragment_index: int
    start: int
    end: int
