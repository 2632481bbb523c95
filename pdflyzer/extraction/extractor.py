"""
Unified PDF extraction interface with automatic fallback.

Wraps multiple extraction backends and attempts fallback when
the primary backend fails or returns no text. Batch extraction
isolates failures per file: one corrupt upload never aborts its siblings.
"""

from typing import Any, Callable, Iterable, List, Optional, Tuple

from ..core import get_config, get_logger, ExtractionError
from ..utils import normalize_page_text
from .models import Document
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend

logger = get_logger(__name__)


BACKENDS = {
    "pypdf": PyPDFBackend,
    "pdfplumber": PDFPlumberBackend
}

ProgressCallback = Callable[[int, int, str], None]


class PDFExtractor:
    """
    Unified PDF extraction with automatic backend fallback.

    Tries the primary backend first, falls back to secondary
    if extraction fails or produces no text.
    """

    def __init__(
        self,
        primary_backend: str = None,
        fallback_backend: str = None
    ):
        """
        Initialize the extractor with configured backends.

        Args:
            primary_backend: Name of primary backend ("pypdf" or "pdfplumber").
            fallback_backend: Name of fallback backend, "none" to disable.
        """
        config = get_config()

        primary_name = primary_backend or config.extraction.primary_backend
        fallback_name = fallback_backend or config.extraction.fallback_backend

        if primary_name not in BACKENDS:
            raise ExtractionError(f"Unknown backend: {primary_name}")

        self.primary = BACKENDS[primary_name]()
        self.fallback = BACKENDS[fallback_name]() if fallback_name in BACKENDS else None

        logger.debug(
            f"Initialized extractor: primary={primary_name}, fallback={fallback_name}"
        )

    def extract(self, data: bytes, filename: str = None) -> List[str]:
        """
        Extract normalized per-page text from PDF bytes.

        Args:
            data: PDF file content.
            filename: Name used in log and error messages.

        Returns:
            Page texts in document order, tokens joined by single spaces.
            Pages without text are kept as empty strings.

        Raises:
            ExtractionError: If all backends fail or no page has text.
        """
        label = filename or "<memory>"
        primary_error = None

        try:
            pages = self._normalize(self.primary.extract(data, filename))

            if any(pages):
                return pages

            logger.debug(f"Primary backend found no text: {label}")

        except ExtractionError as e:
            primary_error = e
            logger.debug(f"Primary backend failed: {e.message}")

        if self.fallback:
            try:
                logger.debug(f"Trying fallback backend for: {label}")
                pages = self._normalize(self.fallback.extract(data, filename))

                if any(pages):
                    return pages

            except ExtractionError as e:
                logger.debug(f"Fallback backend also failed: {e.message}")

        if primary_error:
            raise primary_error

        raise ExtractionError(
            "No extractable text (the PDF may be a scanned image)",
            filename=filename
        )

    def extract_document(self, data: bytes, file_name: str, file_index: int = 0) -> Document:
        """
        Extract a single upload into a Document.

        Raises:
            ExtractionError: If the file cannot be parsed or has no text.
        """
        pages = self.extract(data, file_name)

        logger.info(f"Extracted {len(pages)} pages from {file_name}")

        return Document(
            file_index=file_index,
            file_name=file_name,
            pages=tuple(pages),
            data=data
        )

    def extract_all(
        self,
        files: Iterable[Any],
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[Document]:
        """
        Extract a batch of uploads, one file at a time.

        A file that fails to extract is logged and skipped; it never
        aborts the remaining files. Surviving documents receive
        contiguous file indexes in upload order.

        Args:
            files: (file_name, bytes) pairs, or upload objects exposing
                   ``name`` and ``getvalue()``.
            progress_callback: Optional callable(current, total, file_name).

        Returns:
            Successfully extracted documents.
        """
        files = list(files)
        documents = []
        skipped = 0

        for position, item in enumerate(files, start=1):
            try:
                file_name, data = read_upload(item)

                if progress_callback:
                    progress_callback(position, len(files), file_name)

                documents.append(
                    self.extract_document(data, file_name, file_index=len(documents))
                )

            except ExtractionError as e:
                logger.warning(f"Skipping {e.filename or 'upload'}: {e.message}")
                skipped += 1

        logger.info(
            f"Batch extraction: {len(documents)} documents, {skipped} skipped"
        )

        return documents

    @staticmethod
    def _normalize(pages: List[str]) -> List[str]:
        return [normalize_page_text(text) for text in pages]


def read_upload(item: Any) -> Tuple[str, bytes]:
    """Unpack an upload into (file_name, bytes)."""
    if isinstance(item, tuple) and len(item) == 2:
        file_name, data = item
    else:
        file_name = getattr(item, "name", None)
        try:
            data = item.getvalue() if hasattr(item, "getvalue") else item.read()
        except Exception as e:
            raise ExtractionError(f"Unreadable upload: {e}", filename=file_name)

    if not isinstance(data, (bytes, bytearray)):
        raise ExtractionError("Upload content is not bytes", filename=file_name)

    return str(file_name or "document.pdf"), bytes(data)


if __name__ == "__main__":
    import sys
    from pathlib import Path

    if len(sys.argv) < 2:
        print("Usage: python -m pdflyzer.extraction.extractor <pdf_file> [...]")
        sys.exit(1)

    uploads = [(Path(p).name, Path(p).read_bytes()) for p in sys.argv[1:]]
    docs = PDFExtractor().extract_all(uploads)

    for doc in docs:
        total_chars = sum(len(text) for text in doc.pages)
        print(f"[{doc.file_index}] {doc.file_name}: {doc.page_count} pages, {total_chars:,} chars")
