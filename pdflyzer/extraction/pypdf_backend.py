"""
pypdf-based text extraction backend.

Fast extraction suitable for most standard PDF files.
Handles encryption detection and empty password decryption.
"""

import io
from typing import List

from pypdf import PdfReader

from ..core import get_logger, ExtractionError

logger = get_logger(__name__)


class PyPDFBackend:
    """
    PDF text extraction using the pypdf library.

    Works on in-memory bytes so uploads never touch the disk.
    """

    name = "pypdf"

    def extract(self, data: bytes, filename: str = None) -> List[str]:
        """
        Extract raw text from every page of a PDF.

        Args:
            data: PDF file content.
            filename: Name used in log and error messages.

        Returns:
            One string per page, in document order. Pages without a
            text layer yield an empty string.

        Raises:
            ExtractionError: If the bytes are not a readable PDF.
        """
        label = filename or "<memory>"
        pages = []

        try:
            reader = PdfReader(io.BytesIO(data))

            if reader.is_encrypted and not reader.decrypt(""):
                raise ExtractionError(
                    "PDF is encrypted and cannot be decrypted",
                    filename=filename
                )

            logger.debug(f"Processing {len(reader.pages)} pages: {label}")

            for page_num, page in enumerate(reader.pages, start=1):
                try:
                    pages.append(page.extract_text() or "")
                except Exception as e:
                    logger.warning(
                        f"Failed to extract page {page_num} from {label}: {e}"
                    )
                    pages.append("")

        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(
                f"pypdf extraction failed: {e}",
                filename=filename,
                details={"backend": self.name}
            )

        return pages


if __name__ == "__main__":
    import sys
    from pathlib import Path

    if len(sys.argv) < 2:
        print("Usage: python -m pdflyzer.extraction.pypdf_backend <pdf_file>")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])
    backend = PyPDFBackend()

    try:
        pages = backend.extract(pdf_path.read_bytes(), pdf_path.name)
        print(f"Extracted {len(pages)} pages from {pdf_path.name}")

        for page_num, text in enumerate(pages[:2], start=1):
            preview = text[:500] + "..." if len(text) > 500 else text
            print(f"\n=== Page {page_num} ===")
            print(preview)

    except ExtractionError as e:
        print(f"Extraction error: {e.message}")
