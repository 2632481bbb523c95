"""
Annotation module for mutable per-match state.

Provides the annotation store shared by the results panel and the
PDF viewer, and the selection-mode state machine for next-word edits.
"""

from .store import AnnotationStore
from .selection import SelectionMode, SelectionController

__all__ = [
    "AnnotationStore",
    "SelectionMode",
    "SelectionController"
]
