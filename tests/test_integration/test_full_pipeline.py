"""
Integration tests for the full upload, search, annotate and export pipeline.

Runs real PDF bytes through extraction, the match engine, the
annotation store, the rendering engine and the CSV exporter.
"""

import csv
import io

import pytest

from pdflyzer.render import HighlightMapper, OverlayStyle, RenderEngine
from pdflyzer.session import Workspace


class TestFullPipeline:
    """
    Integration tests for the complete pipeline.

    These tests verify that:
    1. Uploaded PDFs are extracted page by page
    2. Searches find every term on every page
    3. Annotations drive both the viewer overlays and the export
    """

    @pytest.fixture
    def workspace(self, configured, make_pdf, corrupt_pdf_bytes):
        """Workspace holding two readable PDFs and one corrupt upload."""
        files = [
            ("contract.pdf", make_pdf([
                "Payment terms: 30 days after delivery",
                "",
                "Late payment: interest of 5 percent"
            ])),
            ("corrupt.pdf", corrupt_pdf_bytes),
            ("memo.pdf", make_pdf(["Reminder: payment overdue since March"])),
        ]
        workspace = Workspace(config=configured)
        workspace.load_files(files)
        return workspace

    def test_upload_skips_corrupt_file(self, workspace):
        assert [d.file_name for d in workspace.documents] == ["contract.pdf", "memo.pdf"]
        assert workspace.documents[0].page_count == 3

    def test_search_annotate_export(self, workspace):
        """Test the user journey from search to CSV."""
        notice = workspace.search(["payment", "interest"])
        assert notice.description == "Found 4 matches."

        matches = workspace.store.all()
        assert [(m.file_index, m.page_number, m.term) for m in matches] == [
            (0, 1, "payment"),
            (0, 3, "payment"),
            (0, 3, "interest"),
            (1, 1, "payment"),
        ]
        assert matches[0].derived_next_word == "terms:"

        workspace.store.toggle_highlight(matches[2].id)
        workspace.store.set_next_word(matches[0].id, "terms: 30 days")

        content, file_name, notice = workspace.export()
        rows = list(csv.reader(io.StringIO(content.decode("utf-8"))))

        assert notice.title == "Export successful"
        assert file_name == "test_results.csv"
        assert len(rows) == 4
        assert rows[1][:5] == ["contract.pdf", "1", "", "Payment", "terms: 30 days"]
        assert all(row[3] != "interest" for row in rows[1:])

    def test_viewer_overlays_follow_annotations(self, workspace):
        """Test that the rendered page reflects highlight toggles."""
        workspace.search(["payment"])
        workspace.go_to_match(workspace.store.for_page(0, 3)[0].id)

        document = workspace.active_document
        with RenderEngine().open(document.data, document.file_index, document.file_name) as rendered:
            layer = rendered.text_layer(workspace.viewer.page_number, workspace.viewer.scale)

        mapper = HighlightMapper()
        overlays = mapper.apply_highlights(layer, workspace.page_matches())
        assert [o.style for o in overlays].count(OverlayStyle.MATCH) == 1

        workspace.store.toggle_highlight(workspace.page_matches()[0].id)

        assert mapper.apply_highlights(layer, workspace.page_matches()) == []
