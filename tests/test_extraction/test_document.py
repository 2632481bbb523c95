"""
Tests for the Document model.
"""

import pytest

from pdflyzer.extraction.models import Document


class TestDocument:
    """Tests for Document."""

    def test_page_text_is_one_indexed(self):
        doc = Document(0, "a.pdf", ("first", "second"))

        assert doc.page_count == 2
        assert doc.page_text(1) == "first"
        assert doc.page_text(2) == "second"

    @pytest.mark.parametrize("page_number", [0, 3, -1])
    def test_page_text_out_of_range(self, page_number):
        """Test that invalid page numbers raise IndexError."""
        doc = Document(0, "a.pdf", ("first", "second"))

        with pytest.raises(IndexError):
            doc.page_text(page_number)

    def test_data_excluded_from_equality(self):
        """Test that raw bytes do not take part in comparisons."""
        assert Document(0, "a.pdf", ("x",), data=b"1") == Document(0, "a.pdf", ("x",), data=b"2")

    def test_document_is_immutable(self):
        doc = Document(0, "a.pdf", ("x",))

        with pytest.raises(AttributeError):
            doc.file_name = "b.pdf"
