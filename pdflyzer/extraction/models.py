"""
Data model for extracted documents.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Document:
    """
    Per-page plain text of one uploaded PDF.

    Created once at upload time and never modified; a new upload
    replaces the whole document set.

    Attributes:
        file_index: Position in the current upload batch (0-based).
        file_name: Original file name as uploaded.
        pages: Page texts in document order. Page N is pages[N - 1].
        data: Raw PDF bytes, kept for the rendering engine.
    """
    file_index: int
    file_name: str
    pages: Tuple[str, ...]
    data: bytes = field(default=b"", repr=False, compare=False)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page_text(self, page_number: int) -> str:
        """
        Get the text of a page.

        Args:
            page_number: Page number (1-indexed).

        Returns:
            The page text.

        Raises:
            IndexError: If the page does not exist.
        """
        if page_number < 1 or page_number > len(self.pages):
            raise IndexError(
                f"Page {page_number} out of range for {self.file_name} "
                f"({len(self.pages)} pages)"
            )
        return self.pages[page_number - 1]
