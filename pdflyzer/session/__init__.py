"""
Session module tying extraction, search, annotation and export together.
"""

from .navigation import ViewerState
from .workspace import Workspace

__all__ = [
    "ViewerState",
    "Workspace"
]
