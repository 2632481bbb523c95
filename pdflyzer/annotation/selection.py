"""
Selection mode for editing a match's next word.

A small state machine:

    IDLE --begin(match_id)--> AWAITING_SELECTION
    AWAITING_SELECTION --capture(non-empty text)--> HAS_SELECTION
    HAS_SELECTION --commit()/cancel()--> IDLE
    any state --reset()--> IDLE   (document or page switch)
"""

from enum import Enum
from typing import Optional

from ..core import get_logger
from .store import AnnotationStore

logger = get_logger(__name__)


class SelectionMode(Enum):
    """States of the next-word selection workflow."""
    IDLE = "idle"
    AWAITING_SELECTION = "awaiting_selection"
    HAS_SELECTION = "has_selection"


class SelectionController:
    """Tracks which match is being edited and the text captured for it."""

    def __init__(self):
        self.mode = SelectionMode.IDLE
        self.match_id: Optional[str] = None
        self.selected_text = ""

    @property
    def is_active(self) -> bool:
        return self.mode is not SelectionMode.IDLE

    def begin(self, match_id: str) -> None:
        """Enter selection mode for a match, discarding any previous selection."""
        self.mode = SelectionMode.AWAITING_SELECTION
        self.match_id = match_id
        self.selected_text = ""
        logger.debug(f"Selection started for match {match_id}")

    def capture(self, text: str) -> bool:
        """
        Record the text the user selected.

        A new capture replaces the previous one while a selection is open.

        Args:
            text: Selected text; surrounding whitespace is stripped.

        Returns:
            True if the selection was accepted.
        """
        if self.mode is SelectionMode.IDLE:
            return False

        text = (text or "").strip()
        if not text:
            return False

        self.selected_text = text
        self.mode = SelectionMode.HAS_SELECTION
        return True

    def commit(self, store: AnnotationStore) -> bool:
        """
        Write the captured text as the match's next word and return to idle.

        Args:
            store: Store owning the match.

        Returns:
            True if the store accepted the update.
        """
        if self.mode is not SelectionMode.HAS_SELECTION:
            return False

        updated = store.set_next_word(self.match_id, self.selected_text)

        if updated:
            logger.info(f"Next word for {self.match_id} set to '{self.selected_text}'")

        self.reset()
        return updated

    def cancel(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return to idle without touching the store."""
        self.mode = SelectionMode.IDLE
        self.match_id = None
        self.selected_text = ""
