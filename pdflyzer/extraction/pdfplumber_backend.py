"""
pdfplumber-based text extraction backend.

Better handling of complex layouts and multi-column documents.
Slower than pypdf, used as the fallback when pypdf finds no text.
"""

import io
from typing import List

import pdfplumber

from ..core import get_logger, ExtractionError

logger = get_logger(__name__)


class PDFPlumberBackend:
    """PDF text extraction using the pdfplumber library."""

    name = "pdfplumber"

    def extract(self, data: bytes, filename: str = None) -> List[str]:
        """
        Extract raw text from every page of a PDF.

        Args:
            data: PDF file content.
            filename: Name used in log and error messages.

        Returns:
            One string per page, in document order.

        Raises:
            ExtractionError: If the bytes are not a readable PDF.
        """
        label = filename or "<memory>"
        pages = []

        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                logger.debug(f"Processing {len(pdf.pages)} pages: {label}")

                for page_num, page in enumerate(pdf.pages, start=1):
                    try:
                        pages.append(page.extract_text() or "")
                    except Exception as e:
                        logger.warning(
                            f"Failed to extract page {page_num} from {label}: {e}"
                        )
                        pages.append("")

        except Exception as e:
            raise ExtractionError(
                f"pdfplumber extraction failed: {e}",
                filename=filename,
                details={"backend": self.name}
            )

        return pages


if __name__ == "__main__":
    import sys
    from pathlib import Path

    if len(sys.argv) < 2:
        print("Usage: python -m pdflyzer.extraction.pdfplumber_backend <pdf_file>")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])

    try:
        pages = PDFPlumberBackend().extract(pdf_path.read_bytes(), pdf_path.name)
        print(f"Extracted {len(pages)} pages from {pdf_path.name}")
    except ExtractionError as e:
        print(f"Extraction error: {e.message}")
