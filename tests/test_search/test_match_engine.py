"""
Tests for the literal multi-term match engine.

Tests match positions, context windows, next-word derivation,
ordering, id uniqueness, and error handling.
"""

import pytest
from unittest.mock import patch

from pdflyzer.extraction.models import Document
from pdflyzer.search.match_engine import MatchEngine, derive_next_word, CONTEXT_CHARS
from pdflyzer.core.exceptions import SearchError


PAGE = "Hello world, hello there:World"


@pytest.fixture
def engine():
    return MatchEngine()


@pytest.fixture
def document():
    return Document(file_index=0, file_name="sample.pdf", pages=(PAGE,))


class TestDeriveNextWord:
    """Tests for derive_next_word."""

    def test_punctuation_kept(self):
        """Test that the token keeps trailing punctuation."""
        assert derive_next_word(PAGE, 5) == "world,"

    def test_colon_is_skipped_before_capture(self):
        """Test that leading colons and spaces are skipped."""
        assert derive_next_word("Total: 100 EUR", 5) == "100"

    def test_colon_inside_token_kept(self):
        """Test that a colon after the first token character is kept."""
        assert derive_next_word(PAGE, 18) == "there:World"

    def test_end_of_page(self):
        """Test that a match at the end of the page has no next word."""
        assert derive_next_word(PAGE, len(PAGE)) == ""

    def test_only_separators_left(self):
        assert derive_next_word("Total : ", 5) == ""


class TestMatchEngineSearch:
    """Tests for MatchEngine.search."""

    def test_single_term_two_matches(self, engine, document):
        """Test that both case variants of a term are found."""
        records = engine.search([document], ["hello"])

        assert len(records) == 2
        assert [r.matched_text for r in records] == ["Hello", "hello"]
        assert records[0].derived_next_word == "world,"
        assert records[1].derived_next_word == "there:World"

    def test_adjacent_terms_both_reported(self, engine, document):
        """Test that matches of different terms are independent records."""
        records = engine.search([document], ["hello", "world"])

        assert len(records) == 4
        assert [r.term for r in records] == ["hello", "hello", "world", "world"]
        assert [r.match_start for r in records] == [0, 13, 6, 25]
        assert records[3].matched_text == "World"
        assert records[3].derived_next_word == ""

    def test_empty_terms_return_empty_list(self, engine, document):
        """Test that no terms means no matches, not an error."""
        assert engine.search([document], []) == []
        assert engine.search([document], ["", "   "]) == []

    def test_no_documents_return_empty_list(self, engine):
        assert engine.search([], ["hello"]) == []

    def test_matches_do_not_overlap(self, engine):
        """Test that scanning resumes after each match."""
        doc = Document(0, "a.pdf", ("aaaa",))

        records = engine.search([doc], ["aa"])

        assert [(r.match_start, r.match_end) for r in records] == [(0, 2), (2, 4)]

    def test_match_offsets_point_at_original_text(self, engine, document):
        """Test that offsets slice the matched text out of the page."""
        for record in engine.search([document], ["WORLD", "hello"]):
            assert PAGE[record.match_start:record.match_end] == record.matched_text

    def test_context_windows(self, engine, document):
        """Test before, after and full context of a match."""
        record = engine.search([document], ["hello"])[1]

        assert record.before_context == "Hello world,"
        assert record.after_context == "there:World"
        assert record.full_context == PAGE

    def test_context_limited_to_window(self):
        """Test that context is cut at the configured width."""
        page = "x" * 80 + " needle " + "y" * 80
        doc = Document(0, "a.pdf", (page,))

        record = MatchEngine(context_chars=10).search([doc], ["needle"])[0]

        assert record.before_context == "x" * 9
        assert record.after_context == "y" * 9
        assert len(record.full_context) == 10 + len("needle") + 10

    def test_default_context_width(self):
        assert MatchEngine().context_chars == CONTEXT_CHARS == 50

    def test_ids_unique_across_files_and_pages(self, engine):
        """Test that every record of a search has a distinct id."""
        docs = [
            Document(0, "a.pdf", ("hello hello", "hello")),
            Document(1, "b.pdf", ("hello",)),
        ]

        records = engine.search(docs, ["hello", "HELLO there"])
        ids = [r.id for r in records]

        assert len(ids) == len(set(ids)) == 4

    def test_ordering_file_page_term(self, engine):
        """Test that results follow file, page, then term order."""
        docs = [
            Document(0, "a.pdf", ("beta alpha", "alpha")),
            Document(1, "b.pdf", ("alpha beta",)),
        ]

        records = engine.search(docs, ["alpha", "beta"])

        assert [(r.file_index, r.page_number, r.term) for r in records] == [
            (0, 1, "alpha"), (0, 1, "beta"), (0, 2, "alpha"),
            (1, 1, "alpha"), (1, 1, "beta"),
        ]

    def test_empty_page_keeps_numbering(self, engine):
        """Test that an empty page still counts toward page numbers."""
        doc = Document(0, "a.pdf", ("", "", "target"))

        assert engine.search([doc], ["target"])[0].page_number == 3

    def test_duplicate_terms_searched_once(self, engine, document):
        records = engine.search([document], ["hello", "HELLO"])

        assert len(records) == 2

    def test_unexpected_failure_wrapped(self, engine, document):
        """Test that internal failures surface as SearchError."""
        with patch("pdflyzer.search.match_engine.fold_case", side_effect=RuntimeError("boom")):
            with pytest.raises(SearchError) as exc_info:
                engine.search([document], ["hello"])

        assert exc_info.value.terms == ["hello"]

    def test_multi_character_lowercase_left_unfolded(self, engine):
        """Test that a dotted capital I only matches itself, keeping offsets aligned."""
        doc = Document(0, "cities.pdf", ("Flights to İstanbul today",))

        exact = engine.search([doc], ["İstanbul"])

        assert len(exact) == 1
        assert exact[0].matched_text == "İstanbul"
        assert exact[0].derived_next_word == "today"
        assert engine.search([doc], ["istanbul"]) == []
