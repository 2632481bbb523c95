"""
Viewer navigation state: active document, page and zoom.
"""

from dataclasses import dataclass


@dataclass
class ViewerState:
    """
    Position of the PDF viewer.

    Attributes:
        file_index: Document shown in the viewer.
        page_number: Current page (1-indexed).
        page_count: Pages in the current document, 0 when none is open.
        scale: Current zoom factor.
        default_scale: Zoom restored when switching documents.
        min_scale: Lowest zoom factor.
        max_scale: Highest zoom factor.
        zoom_step: Zoom increment.
    """
    file_index: int = 0
    page_number: int = 1
    page_count: int = 0
    scale: float = 1.2
    default_scale: float = 1.2
    min_scale: float = 0.6
    max_scale: float = 3.0
    zoom_step: float = 0.2

    def open(self, file_index: int, page_count: int) -> None:
        """Show a document from its first page at default zoom."""
        self.file_index = file_index
        self.page_count = page_count
        self.page_number = 1
        self.scale = self.default_scale

    def close(self) -> None:
        self.open(0, 0)

    def go_to(self, page_number: int) -> bool:
        """
        Jump to a page.

        Returns:
            True if the page exists and the position changed.
        """
        if page_number < 1 or page_number > self.page_count:
            return False
        if page_number == self.page_number:
            return False
        self.page_number = page_number
        return True

    def next_page(self) -> bool:
        return self.go_to(self.page_number + 1)

    def prev_page(self) -> bool:
        return self.go_to(self.page_number - 1)

    def zoom_in(self) -> float:
        self.scale = round(min(self.scale + self.zoom_step, self.max_scale), 2)
        return self.scale

    def zoom_out(self) -> float:
        self.scale = round(max(self.scale - self.zoom_step, self.min_scale), 2)
        return self.scale
