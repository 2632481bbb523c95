"""
PDF extraction module for PDFlyzer.

Turns uploaded PDF bytes into ordered per-page text with multiple
backends (pypdf and pdfplumber) and automatic fallback support.
"""

from .models import Document
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend
from .extractor import PDFExtractor

__all__ = [
    "Document",
    "PyPDFBackend",
    "PDFPlumberBackend",
    "PDFExtractor"
]
