"""
Utility module providing shared helper functions.

Contains text processing utilities used across the application.
Depends only on the standard library.
"""

from .text_utils import (
    normalize_page_text,
    truncate_text,
    fold_case,
    file_stem
)

__all__ = [
    "normalize_page_text",
    "truncate_text",
    "fold_case",
    "file_stem"
]
