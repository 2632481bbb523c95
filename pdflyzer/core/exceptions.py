"""
Custom exception hierarchy for PDFlyzer.

Provides specific exception types for each failure mode:
configuration errors, extraction failures, search, rendering and export problems.

"No documents loaded" and "no matches found" are not exceptions; they are
reported as validation notices (see notifications.py).
"""

from typing import List


class PDFlyzerError(Exception):
    """Base exception for all PDFlyzer errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(PDFlyzerError):
    """Raised when configuration is invalid or missing."""
    pass


class ExtractionError(PDFlyzerError):
    """Raised when a PDF cannot be parsed or yields no text."""

    def __init__(self, message: str, filename: str = None, details: dict = None):
        """
        Initialize extraction error.

        Args:
            message: Error description.
            filename: Name of the problematic PDF file.
            details: Additional context.
        """
        super().__init__(message, details)
        self.filename = filename


class SearchError(PDFlyzerError):
    """Raised when a search fails unexpectedly."""

    def __init__(self, message: str, terms: List[str] = None, details: dict = None):
        """
        Initialize search error.

        Args:
            message: Error description.
            terms: The search terms in use.
            details: Additional context.
        """
        super().__init__(message, details)
        self.terms = list(terms or [])


class RenderError(PDFlyzerError):
    """Raised when the rendering engine cannot open a document or page."""

    def __init__(self, message: str, page_number: int = None, details: dict = None):
        super().__init__(message, details)
        self.page_number = page_number


class ExportError(PDFlyzerError):
    """Raised when results cannot be serialized for download."""
    pass


if __name__ == "__main__":
    try:
        raise ConfigurationError("Config file not found", {"path": "/config/config.json"})
    except PDFlyzerError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message}")
        print(f"Details: {e.details}")

    try:
        raise ExtractionError("No extractable text", filename="scan.pdf")
    except ExtractionError as e:
        print(f"Extraction failed for: {e.filename}")
