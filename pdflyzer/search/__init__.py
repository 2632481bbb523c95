"""
Search module for literal multi-term matching.

Provides term parsing, the match engine and the match data models.
"""

from .models import Document, MatchRecord, Annotation, AnnotatedMatch
from .query_parser import normalize_terms, add_term, remove_term
from .match_engine import MatchEngine, derive_next_word, CONTEXT_CHARS

__all__ = [
    "Document",
    "MatchRecord",
    "Annotation",
    "AnnotatedMatch",
    "normalize_terms",
    "add_term",
    "remove_term",
    "MatchEngine",
    "derive_next_word",
    "CONTEXT_CHARS"
]
