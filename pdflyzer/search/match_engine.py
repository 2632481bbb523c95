"""
Literal multi-term match engine.

Scans extracted page text for every search term, case-insensitively,
and produces one immutable MatchRecord per occurrence with a context
window and the word that follows the match.

Pages are scanned independently: a term broken across a page
boundary is not found.
"""

import time
from typing import List, Sequence

from ..core import get_logger, SearchError
from ..extraction.models import Document
from ..utils import fold_case
from .models import MatchRecord
from .query_parser import normalize_terms

logger = get_logger(__name__)


CONTEXT_CHARS = 50

NEXT_WORD_SKIP = ":"


def derive_next_word(page_text: str, match_end: int) -> str:
    """
    Find the token that follows a match.

    Skips whitespace and colons starting at match_end, then collects
    characters up to the next whitespace or the end of the page.
    Punctuation inside the token is kept.

    Args:
        page_text: Full page text.
        match_end: Offset just past the match.

    Returns:
        The next token, or "" when the page ends first.
    """
    index = max(match_end, 0)
    length = len(page_text)

    while index < length and (page_text[index].isspace() or page_text[index] == NEXT_WORD_SKIP):
        index += 1

    start = index
    while index < length and not page_text[index].isspace():
        index += 1

    return page_text[start:index]


class MatchEngine:
    """
    Case-insensitive literal search over per-page document text.

    Results are ordered by file, page, term order, then position
    on the page. Ids embed the record ordinal so they never collide
    within one search call.
    """

    def __init__(self, context_chars: int = CONTEXT_CHARS):
        """
        Initialize the engine.

        Args:
            context_chars: Characters of context kept on each side of a match.
        """
        self.context_chars = context_chars

    def search(self, documents: Sequence[Document], terms: Sequence[str]) -> List[MatchRecord]:
        """
        Find every occurrence of every term.

        Args:
            documents: Extracted documents to scan.
            terms: Search terms, matched as literal substrings.

        Returns:
            Match records; empty when there are no terms or no documents.

        Raises:
            SearchError: If scanning fails unexpectedly.
        """
        terms = normalize_terms(terms)

        if not terms or not documents:
            return []

        start_time = time.time()
        records: List[MatchRecord] = []

        try:
            for document in documents:
                for page_number, page_text in enumerate(document.pages, start=1):
                    folded_page = fold_case(page_text)

                    for term in terms:
                        self._scan_page(document, page_number, page_text, folded_page, term, records)

        except Exception as e:
            logger.error(f"Search failed: {e}")
            raise SearchError(f"Search execution failed: {e}", terms=terms)

        execution_time = (time.time() - start_time) * 1000

        logger.debug(
            f"Search {terms}: {len(records)} matches in "
            f"{len(documents)} documents ({execution_time:.1f}ms)"
        )

        return records

    def _scan_page(
        self,
        document: Document,
        page_number: int,
        page_text: str,
        folded_page: str,
        term: str,
        records: List[MatchRecord]
    ) -> None:
        """Append records for all non-overlapping occurrences of term on one page."""
        needle = fold_case(term)
        index = folded_page.find(needle)

        while index != -1:
            match_end = index + len(needle)

            records.append(self._build_record(
                record_id=f"{document.file_index}-{page_number}-{len(records)}",
                document=document,
                page_number=page_number,
                page_text=page_text,
                term=term,
                match_start=index,
                match_end=match_end
            ))

            index = folded_page.find(needle, match_end)

    def _build_record(
        self,
        record_id: str,
        document: Document,
        page_number: int,
        page_text: str,
        term: str,
        match_start: int,
        match_end: int
    ) -> MatchRecord:
        """Slice context windows out of the original page text."""
        context_start = max(0, match_start - self.context_chars)
        context_end = min(len(page_text), match_end + self.context_chars)

        return MatchRecord(
            id=record_id,
            file_index=document.file_index,
            file_name=document.file_name,
            page_number=page_number,
            term=term,
            match_start=match_start,
            match_end=match_end,
            before_context=page_text[context_start:match_start].strip(),
            matched_text=page_text[match_start:match_end],
            after_context=page_text[match_end:context_end].strip(),
            full_context=page_text[context_start:context_end],
            derived_next_word=derive_next_word(page_text, match_end)
        )


if __name__ == "__main__":
    doc = Document(
        file_index=0,
        file_name="sample.pdf",
        pages=("Hello world, hello there:World",)
    )

    for record in MatchEngine().search([doc], ["hello", "world"]):
        print(
            f"{record.id} [{record.term}] '{record.matched_text}' "
            f"-> next word '{record.derived_next_word}'"
        )
