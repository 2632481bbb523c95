"""
Tests for the session workspace.

Tests upload, search, export and navigation as seen by the user
interface, including the notice each operation reports.
"""

import csv
import io

import pytest
from unittest.mock import Mock, patch

from pdflyzer.annotation.selection import SelectionMode
from pdflyzer.core.exceptions import ExportError, SearchError
from pdflyzer.core.notifications import NoticeKind
from pdflyzer.session.workspace import Workspace


@pytest.fixture
def workspace(configured):
    return Workspace(config=configured)


@pytest.fixture
def invoices(make_pdf):
    """Two invoices, the first spanning two pages."""
    return [
        ("january.pdf", make_pdf(["Invoice total: 100 EUR", "Total due within 30 days"])),
        ("february.pdf", make_pdf(["Invoice total: 250 EUR"])),
    ]


@pytest.fixture
def loaded(workspace, invoices):
    workspace.load_files(invoices)
    return workspace


@pytest.fixture
def searched(loaded):
    loaded.search(["total"])
    return loaded


class TestLoadFiles:
    """Tests for Workspace.load_files."""

    def test_no_files(self, workspace):
        notice = workspace.load_files([])

        assert notice.kind is NoticeKind.VALIDATION
        assert workspace.documents == []

    def test_single_file(self, workspace, sample_pdf_bytes):
        notice = workspace.load_files([("sample.pdf", sample_pdf_bytes)])

        assert notice.kind is NoticeKind.SUCCESS
        assert notice.title == "PDFs uploaded successfully"
        assert notice.description == "1 file(s) ready to be searched."
        assert workspace.active_document.file_name == "sample.pdf"
        assert workspace.viewer.page_count == 1

    def test_single_corrupt_file_reports_error(self, workspace, corrupt_pdf_bytes):
        notice = workspace.load_files([("broken.pdf", corrupt_pdf_bytes)])

        assert notice.is_error
        assert notice.title == "Error uploading PDFs"
        assert workspace.documents == []

    def test_batch_skips_corrupt_file(self, workspace, invoices, corrupt_pdf_bytes):
        """Test that a corrupt file in a batch is skipped and counted."""
        files = [invoices[0], ("broken.pdf", corrupt_pdf_bytes), invoices[1]]

        notice = workspace.load_files(files)

        assert notice.kind is NoticeKind.SUCCESS
        assert "2 file(s) ready" in notice.description
        assert "1 file(s) could not be read" in notice.description
        assert [d.file_index for d in workspace.documents] == [0, 1]

    def test_failed_upload_keeps_previous_documents(self, searched, corrupt_pdf_bytes):
        matches_before = len(searched.store)

        notice = searched.load_files([("broken.pdf", corrupt_pdf_bytes)])

        assert notice.is_error
        assert len(searched.documents) == 2
        assert len(searched.store) == matches_before

    def test_new_upload_discards_results(self, searched, sample_pdf_bytes):
        searched.load_files([("sample.pdf", sample_pdf_bytes)])

        assert len(searched.store) == 0
        assert searched.terms == []
        assert searched.file_filter is None

    def test_progress_reported(self, workspace, invoices):
        callback = Mock()

        workspace.load_files(invoices, progress_callback=callback)

        callback.assert_called_with(2, 2, "february.pdf")


class TestSearch:
    """Tests for Workspace.search."""

    def test_search_without_documents(self, workspace):
        notice = workspace.search(["total"])

        assert notice.kind is NoticeKind.VALIDATION
        assert notice.title == "No PDFs loaded"

    def test_search_without_terms(self, loaded):
        notice = loaded.search(["  "])

        assert notice.kind is NoticeKind.VALIDATION
        assert len(loaded.store) == 0

    def test_search_finds_matches(self, loaded):
        notice = loaded.search(["total"])

        assert notice.kind is NoticeKind.SUCCESS
        assert notice.description == "Found 3 matches."
        assert loaded.terms == ["total"]
        assert [m.file_index for m in loaded.store] == [0, 0, 1]

    def test_comma_separated_terms(self, loaded):
        loaded.search("invoice, TOTAL, invoice")

        assert loaded.terms == ["invoice", "TOTAL"]

    def test_no_matches(self, searched):
        notice = searched.search(["absent"])

        assert notice.kind is NoticeKind.VALIDATION
        assert notice.title == "No matches found"
        assert len(searched.store) == 0

    def test_new_search_replaces_annotations(self, searched):
        first_id = searched.store.records[0].id
        searched.store.toggle_highlight(first_id)

        searched.search(["total"])

        assert searched.store.get(first_id).is_highlighted is True

    def test_search_error_keeps_previous_results(self, searched):
        searched.engine = Mock()
        searched.engine.search.side_effect = SearchError("boom", terms=["x"])
        before = searched.store

        notice = searched.search(["x"])

        assert notice.is_error
        assert notice.title == "Search error"
        assert searched.store is before

    def test_search_resets_selection(self, searched):
        searched.selection.begin(searched.store.records[0].id)

        searched.search(["invoice"])

        assert searched.selection.mode is SelectionMode.IDLE

    def test_batch_counter_changes(self, loaded):
        batch = loaded.batch

        loaded.search(["total"])

        assert loaded.batch == batch + 1


class TestExport:
    """Tests for Workspace.export."""

    def test_nothing_to_export(self, loaded):
        content, file_name, notice = loaded.export()

        assert content is None
        assert notice.kind is NoticeKind.VALIDATION
        assert file_name == "test_results.csv"

    def test_export_highlighted_only(self, searched):
        searched.store.toggle_highlight(searched.store.records[0].id)

        content, file_name, notice = searched.export()
        rows = list(csv.reader(io.StringIO(content.decode("utf-8"))))

        assert notice.kind is NoticeKind.SUCCESS
        assert notice.description == "Results exported as test_results.csv"
        assert len(rows) == 3
        assert rows[0][0] == "File"

    def test_edited_next_word_exported(self, searched):
        match_id = searched.store.records[0].id
        searched.store.set_next_word(match_id, "100 EUR")

        content, _, _ = searched.export()
        rows = list(csv.reader(io.StringIO(content.decode("utf-8"))))

        assert rows[1][4] == "100 EUR"

    def test_single_document_file_name(self, workspace, sample_pdf_bytes):
        workspace.load_files([("report.pdf", sample_pdf_bytes)])
        workspace.search(["hello"])

        _, file_name, _ = workspace.export()

        assert file_name == "report_search_results.csv"

    def test_single_file_layout(self, searched):
        searched.config.gui.multi_file = False

        content, _, _ = searched.export()

        assert content.decode("utf-8").startswith("Page,Before Match,Match,After Match,Full Context\n")

    def test_export_failure(self, searched):
        with patch(
            "pdflyzer.session.workspace.serialize",
            side_effect=ExportError("encoding failed")
        ):
            content, _, notice = searched.export()

        assert content is None
        assert notice.is_error
        assert notice.title == "Export failed"


class TestNavigation:
    """Tests for document, page and match navigation."""

    def test_go_to_match_opens_its_page(self, searched):
        second_page_match = searched.store.for_page(0, 2)[0]

        assert searched.go_to_match(second_page_match.id) is True
        assert searched.viewer.file_index == 0
        assert searched.viewer.page_number == 2
        assert [m.id for m in searched.page_matches()] == [second_page_match.id]

    def test_go_to_match_in_other_file(self, searched):
        other = searched.store.for_file(1)[0]

        searched.go_to_match(other.id)

        assert searched.active_document.file_name == "february.pdf"
        assert searched.viewer.page_number == 1

    def test_go_to_unknown_match(self, searched):
        assert searched.go_to_match("missing") is False

    def test_page_change_resets_selection(self, searched):
        searched.selection.begin(searched.store.records[0].id)

        searched.next_page()

        assert searched.selection.mode is SelectionMode.IDLE

    def test_select_file_resets_zoom(self, searched):
        searched.zoom_in()

        searched.select_file(1)

        assert searched.viewer.scale == searched.config.render.default_scale

    def test_select_invalid_file(self, searched):
        assert searched.select_file(7) is False
        assert searched.viewer.file_index == 0

    def test_file_filter(self, searched):
        searched.set_file_filter(1)

        assert [m.file_index for m in searched.visible_matches()] == [1]
        assert searched.viewer.file_index == 1

        searched.set_file_filter(None)

        assert len(searched.visible_matches()) == 3

    def test_prev_page_at_start(self, searched):
        assert searched.prev_page() is False

    def test_zoom_limits_from_config(self, searched):
        for _ in range(20):
            searched.zoom_in()

        assert searched.viewer.scale == searched.config.render.max_scale
