"""
Tests for user-facing notices.
"""

import pytest

from pdflyzer.core.notifications import (
    Notice,
    NoticeKind,
    success_notice,
    validation_notice,
    error_notice,
    empty_search_notice,
    no_matches_notice,
)


class TestNotice:
    """Tests for the Notice value type."""

    def test_factories_set_kind(self):
        """Test that each factory produces its kind."""
        assert success_notice("a").kind is NoticeKind.SUCCESS
        assert validation_notice("a").kind is NoticeKind.VALIDATION
        assert error_notice("a").kind is NoticeKind.ERROR

    def test_only_error_is_error(self):
        """Test is_error for each kind."""
        assert error_notice("Failed").is_error
        assert not success_notice("Done").is_error
        assert not validation_notice("Nothing").is_error

    def test_notice_is_immutable(self):
        """Test that notices cannot be modified."""
        notice = Notice(NoticeKind.SUCCESS, "Done", "All good")

        with pytest.raises(AttributeError):
            notice.title = "Changed"


class TestSoftOutcomes:
    """Tests for the empty-search and no-match notices."""

    def test_empty_search_is_validation(self):
        """Test that searching with no documents is not an error."""
        notice = empty_search_notice()

        assert notice.kind is NoticeKind.VALIDATION
        assert notice.title == "No PDFs loaded"

    def test_no_matches_is_distinct_from_error(self):
        """Test that zero results is an informational notice."""
        notice = no_matches_notice()

        assert notice.kind is NoticeKind.VALIDATION
        assert notice.title == "No matches found"
        assert not notice.is_error
