"""
Data models for match search and annotation.

Match data and annotation state live in separate types: MatchRecord is
immutable and produced once per search, Annotation holds the only two
fields a user may change, and AnnotatedMatch joins the two at read time.
"""

from dataclasses import dataclass

from ..extraction.models import Document


@dataclass(frozen=True)
class MatchRecord:
    """
    One occurrence of one term on one page of one document.

    Attributes:
        id: Unique within a result batch ("<file>-<page>-<ordinal>").
        file_index: Index of the source Document.
        file_name: Name of the source Document.
        page_number: Page number (1-indexed).
        term: Search term as typed.
        match_start: Offset of the match in the page text.
        match_end: Offset just past the match.
        before_context: Up to 50 characters before the match, trimmed.
        matched_text: Matched substring in its original case, verbatim.
        after_context: Up to 50 characters after the match, trimmed.
        full_context: Untrimmed before + match + after slice.
        derived_next_word: First token after the match.
    """
    id: str
    file_index: int
    file_name: str
    page_number: int
    term: str
    match_start: int
    match_end: int
    before_context: str
    matched_text: str
    after_context: str
    full_context: str
    derived_next_word: str


@dataclass
class Annotation:
    """
    Mutable per-match state owned by the AnnotationStore.

    Attributes:
        is_highlighted: Whether the match is active (rendered and exported).
        next_word: User override of the derived next word.
    """
    is_highlighted: bool = True
    next_word: str = ""


@dataclass(frozen=True)
class AnnotatedMatch:
    """
    Read-only join of a MatchRecord with its current Annotation.

    Attributes:
        record: The immutable match data.
        is_highlighted: Highlight flag at the time of the read.
        next_word: Next-word override at the time of the read.
    """
    record: MatchRecord
    is_highlighted: bool
    next_word: str

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def file_index(self) -> int:
        return self.record.file_index

    @property
    def file_name(self) -> str:
        return self.record.file_name

    @property
    def page_number(self) -> int:
        return self.record.page_number

    @property
    def term(self) -> str:
        return self.record.term

    @property
    def matched_text(self) -> str:
        return self.record.matched_text

    @property
    def before_context(self) -> str:
        return self.record.before_context

    @property
    def after_context(self) -> str:
        return self.record.after_context

    @property
    def full_context(self) -> str:
        return self.record.full_context

    @property
    def derived_next_word(self) -> str:
        return self.record.derived_next_word

    @property
    def next_word_edited(self) -> bool:
        """True when the user replaced the derived next word."""
        return self.next_word != self.record.derived_next_word


__all__ = ["Document", "MatchRecord", "Annotation", "AnnotatedMatch"]


if __name__ == "__main__":
    record = MatchRecord(
        id="0-1-0",
        file_index=0,
        file_name="invoice.pdf",
        page_number=1,
        term="total",
        match_start=10,
        match_end=15,
        before_context="Subtotal 90",
        matched_text="Total",
        after_context=": 100 EUR",
        full_context="Subtotal 90 Total: 100 EUR",
        derived_next_word="100"
    )
    view = AnnotatedMatch(record, is_highlighted=True, next_word="100 EUR")
    print(f"{view.id}: {view.matched_text} -> {view.next_word} (edited={view.next_word_edited})")
