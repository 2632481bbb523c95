"""
Text utility functions for PDFlyzer.

Provides page-text normalization and display truncation
for extracted PDF content.
"""

import unicodedata
from pathlib import PurePath


def normalize_page_text(text: str) -> str:
    """
    Collapse extracted page text into single-space separated tokens.

    Line breaks and runs of whitespace produced by the layout engine
    are not preserved; token order is. Control characters other than
    whitespace are dropped.

    Args:
        text: Raw text from PDF extraction.

    Returns:
        Normalized page text, empty string if nothing remains.
    """
    if not text:
        return ""

    text = "".join(
        char for char in text
        if not unicodedata.category(char).startswith("C")
        or char.isspace()
    )

    return " ".join(text.split())


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate text to maximum length with ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length including suffix.
        suffix: String to append when truncated.

    Returns:
        Truncated text or original if within limit.
    """
    if not text or len(text) <= max_length:
        return text

    truncate_at = max_length - len(suffix)
    if truncate_at <= 0:
        return suffix[:max_length]

    # Try to break at word boundary
    truncated = text[:truncate_at]
    last_space = truncated.rfind(" ")

    if last_space > truncate_at * 0.7:
        truncated = truncated[:last_space]

    return truncated + suffix


def fold_case(text: str) -> str:
    """
    Lowercase text without changing its length.

    Characters whose lowercase form is longer than one character
    (e.g. "\u0130") are left as is so that offsets in the folded text
    remain valid offsets in the original.
    """
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


def file_stem(file_name: str) -> str:
    """Return a file name without directories or extension."""
    stem = PurePath(file_name or "").stem
    return stem or "document"


if __name__ == "__main__":
    sample_text = """
    Invoice   number:\t 2024-17


    Total due:   1,200.00 EUR
    """

    print("=== normalize_page_text ===")
    print(repr(normalize_page_text(sample_text)))

    print("\n=== truncate_text ===")
    long_text = "The quick brown fox jumps over the lazy dog near the river bank."
    print(f"Truncated (30): {truncate_text(long_text, 30)}")

    print("\n=== file_stem ===")
    print(file_stem("reports/annual report.pdf"))
