"""
Maps logical matches onto a rendered page's text fragments.

Each pass starts from a clean slate, so applying the same inputs
twice yields the same overlays. Fragments are scanned one at a time:
a match split across two fragments is not found. Overlays only
describe boxes to paint; fragments and their geometry are never changed.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..core import get_logger
from ..search.models import AnnotatedMatch
from ..utils import fold_case
from .models import Overlay, OverlayStyle, TextLayer

logger = get_logger(__name__)


OverlayKey = Tuple[int, int, int, OverlayStyle]
PageKey = Tuple[int, int]


class HighlightMapper:
    """
    Computes highlight overlays for the page currently on screen.

    Keeps the overlays of the last completed pass together with the page
    they belong to; a new pass replaces them.
    """

    def __init__(self):
        self._overlays: List[Overlay] = []
        self._page: Optional[PageKey] = None

    @property
    def overlays(self) -> List[Overlay]:
        return list(self._overlays)

    @property
    def page(self) -> Optional[PageKey]:
        """(file_index, page_number) of the last pass, None once cleared."""
        return self._page

    def overlays_for(self, file_index: int, page_number: int) -> List[Overlay]:
        """Overlays of the last pass if it was computed for this page, else []."""
        if self._page != (file_index, page_number):
            return []
        return self.overlays

    def clear(self) -> None:
        self._overlays = []
        self._page = None

    def apply_highlights(
        self,
        layer: Optional[TextLayer],
        active_matches: Sequence[AnnotatedMatch]
    ) -> List[Overlay]:
        """
        Recompute overlays for a rendered page.

        Only highlighted matches on the layer's page are painted. When
        the match's next word differs from the term, its occurrences get
        a second, distinct overlay style.

        Args:
            layer: Text layer of the rendered page.
            active_matches: Candidate matches (any page, any state).

        Returns:
            The overlays of this pass. If the layer is not ready or empty,
            nothing is recomputed: the previous overlays stay when they
            belong to the same page, otherwise they are cleared. A missing
            layer clears them.
        """
        if layer is None:
            logger.debug("No text layer, overlays cleared")
            self.clear()
            return []

        if not layer.ready or not layer.fragments:
            page = (layer.file_index, layer.page_number)
            if page != self._page:
                logger.debug(f"Text layer of page {layer.page_number} not ready, previous page cleared")
                self.clear()
                return []

            logger.debug("Text layer not ready, highlight pass skipped")
            return self.overlays

        page_matches = [
            match for match in active_matches
            if match.is_highlighted
            and match.file_index == layer.file_index
            and match.page_number == layer.page_number
        ]

        folded_fragments = [fold_case(fragment.text) for fragment in layer.fragments]
        found: Dict[OverlayKey, Overlay] = {}

        for match in page_matches:
            self._paint(layer, folded_fragments, match.matched_text, match.id, OverlayStyle.MATCH, found)

        for match in page_matches:
            next_word = match.next_word
            if next_word and fold_case(next_word) != fold_case(match.term):
                self._paint(layer, folded_fragments, next_word, match.id, OverlayStyle.NEXT_WORD, found)

        self._overlays = list(found.values())
        self._page = (layer.file_index, layer.page_number)

        logger.debug(
            f"Page {layer.page_number}: {len(page_matches)} active matches, "
            f"{len(self._overlays)} overlays"
        )

        return self.overlays

    def _paint(
        self,
        layer: TextLayer,
        folded_fragments: List[str],
        needle: str,
        match_id: str,
        style: OverlayStyle,
        found: Dict[OverlayKey, Overlay]
    ) -> None:
        """Add an overlay for every occurrence of needle inside a single fragment."""
        needle = fold_case(needle)
        if not needle:
            return

        for fragment_index, folded_text in enumerate(folded_fragments):
            fragment = layer.fragments[fragment_index]

            for start in _occurrences(folded_text, needle):
                end = start + len(needle)
                key = (fragment_index, start, end, style)

                if key not in found:
                    found[key] = Overlay(
                        rect=fragment.sub_rect(start, end),
                        style=style,
                        match_id=match_id,
                        fragment_index=fragment_index,
                        start=start,
                        end=end
                    )


def _occurrences(haystack: str, needle: str) -> Iterator[int]:
    """Yield start offsets of non-overlapping occurrences."""
    index = haystack.find(needle)
    while index != -1:
        yield index
        index = haystack.find(needle, index + len(needle))
