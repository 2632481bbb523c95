"""
Annotation store for one search result batch.

Holds the immutable match table and a separate mutable annotation
table, both keyed by match id. The results panel and the PDF viewer
read from the same store instance so highlight state never diverges.

Updates addressed to an unknown id are ignored: ids only ever come
from records this store was built with.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Optional

from ..core import get_logger
from ..search.models import Annotation, AnnotatedMatch, MatchRecord

logger = get_logger(__name__)


MatchPredicate = Callable[[MatchRecord], bool]


class AnnotationStore:
    """
    Single owner of per-match highlight flags and next-word overrides.

    Records keep their search order. All reads return AnnotatedMatch
    snapshots; the underlying records are never handed out for mutation.
    """

    def __init__(self, records: Iterable[MatchRecord] = ()):
        """
        Build the store for a result batch.

        Args:
            records: Match records from one search call.

        Raises:
            ValueError: If two records share an id.
        """
        self._records: Dict[str, MatchRecord] = {}
        self._annotations: Dict[str, Annotation] = {}

        for record in records:
            if record.id in self._records:
                raise ValueError(f"Duplicate match id: {record.id}")

            self._records[record.id] = record
            self._annotations[record.id] = Annotation(
                is_highlighted=True,
                next_word=record.derived_next_word
            )

        logger.debug(f"Annotation store created with {len(self._records)} matches")

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, match_id: object) -> bool:
        return match_id in self._records

    def __iter__(self) -> Iterator[AnnotatedMatch]:
        return iter(self.all())

    @property
    def records(self) -> List[MatchRecord]:
        """Immutable match data in search order."""
        return list(self._records.values())

    def get(self, match_id: str) -> Optional[AnnotatedMatch]:
        """Return the joined view of one match, or None if unknown."""
        if match_id not in self._records:
            return None
        return self._join(self._records[match_id])

    def toggle_highlight(self, match_id: str) -> Optional[bool]:
        """
        Flip the highlight flag of a match.

        Args:
            match_id: Id of the match.

        Returns:
            The new flag, or None if the id is unknown (no change made).
        """
        annotation = self._annotations.get(match_id)
        if annotation is None:
            logger.debug(f"toggle_highlight ignored for unknown id {match_id}")
            return None

        annotation.is_highlighted = not annotation.is_highlighted
        return annotation.is_highlighted

    def set_highlight(self, match_id: str, highlighted: bool) -> bool:
        """
        Set the highlight flag explicitly.

        Returns:
            True if the id is known.
        """
        annotation = self._annotations.get(match_id)
        if annotation is None:
            return False

        annotation.is_highlighted = bool(highlighted)
        return True

    def set_next_word(self, match_id: str, new_word: str) -> bool:
        """
        Replace the next-word override of a match.

        An empty string is accepted and clears the override.

        Args:
            match_id: Id of the match.
            new_word: Replacement text.

        Returns:
            True if the id is known.
        """
        annotation = self._annotations.get(match_id)
        if annotation is None:
            logger.debug(f"set_next_word ignored for unknown id {match_id}")
            return False

        annotation.next_word = new_word if new_word is not None else ""
        return True

    def filter(self, predicate: MatchPredicate) -> List[AnnotatedMatch]:
        """
        Select matches by their immutable fields.

        Args:
            predicate: Callable receiving a MatchRecord (file_index,
                       page_number, term...) and returning a bool.

        Returns:
            Joined views of the matching records, in search order.
        """
        return [
            self._join(record)
            for record in self._records.values()
            if predicate(record)
        ]

    def all(self) -> List[AnnotatedMatch]:
        return self.filter(lambda record: True)

    def for_page(self, file_index: int, page_number: int) -> List[AnnotatedMatch]:
        """Matches on one page of one document."""
        return self.filter(
            lambda r: r.file_index == file_index and r.page_number == page_number
        )

    def for_file(self, file_index: Optional[int]) -> List[AnnotatedMatch]:
        """Matches in one document; None selects every document."""
        if file_index is None:
            return self.all()
        return self.filter(lambda r: r.file_index == file_index)

    def for_term(self, term: str) -> List[AnnotatedMatch]:
        return self.filter(lambda r: r.term == term)

    def highlighted(self, file_index: Optional[int] = None) -> List[AnnotatedMatch]:
        """Active matches, optionally restricted to one document."""
        return [m for m in self.for_file(file_index) if m.is_highlighted]

    def terms(self) -> List[str]:
        """Distinct terms present in the batch, in first-seen order."""
        return list(dict.fromkeys(record.term for record in self._records.values()))

    def pages_with_matches(self, file_index: int) -> List[int]:
        """Sorted page numbers of a document that carry at least one match."""
        return sorted({
            record.page_number
            for record in self._records.values()
            if record.file_index == file_index
        })

    def _join(self, record: MatchRecord) -> AnnotatedMatch:
        annotation = self._annotations[record.id]
        return AnnotatedMatch(
            record=record,
            is_highlighted=annotation.is_highlighted,
            next_word=annotation.next_word
        )


if __name__ == "__main__":
    from ..extraction.models import Document
    from ..search.match_engine import MatchEngine

    doc = Document(0, "sample.pdf", ("Total: 100 EUR. Total due: 120 EUR",))
    store = AnnotationStore(MatchEngine().search([doc], ["total"]))

    first = store.records[0].id
    store.toggle_highlight(first)
    store.set_next_word(first, "100 EUR")
    store.toggle_highlight("missing-id")

    for match in store:
        print(f"{match.id}: highlighted={match.is_highlighted} next={match.next_word!r}")
