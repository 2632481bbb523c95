"""
Results module for grouping and exporting matches.

Groups matches for display and serializes them to CSV.
"""

from .aggregator import group_by_term, group_by_file, group_by_file_and_term, count_by_term
from .exporter import (
    ResultTable,
    to_table,
    serialize,
    export_filename,
    HEADERS,
    SINGLE_FILE_HEADERS,
    DEFAULT_EXPORT_FILENAME
)

__all__ = [
    "group_by_term",
    "group_by_file",
    "group_by_file_and_term",
    "count_by_term",
    "ResultTable",
    "to_table",
    "serialize",
    "export_filename",
    "HEADERS",
    "SINGLE_FILE_HEADERS",
    "DEFAULT_EXPORT_FILENAME"
]
