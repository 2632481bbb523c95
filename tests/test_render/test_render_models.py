"""
Tests for text layer geometry.
"""

import pytest

from pdflyzer.render.models import Rect, TextFragment


class TestRect:
    def test_width_height(self):
        rect = Rect(10, 20, 40, 32)

        assert rect.width == 30
        assert rect.height == 12


class TestSubRect:
    """Tests for TextFragment.sub_rect."""

    def test_interpolates_without_char_boxes(self):
        """Test proportional placement across the fragment width."""
        fragment = TextFragment("abcdefghij", Rect(0, 5, 100, 15))

        rect = fragment.sub_rect(2, 5)

        assert rect == Rect(20, 5, 50, 15)

    def test_interpolates_vertical_run(self):
        """Test that a tall fragment is split along its height."""
        fragment = TextFragment("abcd", Rect(10, 0, 20, 80))

        assert fragment.sub_rect(1, 3) == Rect(10, 20, 20, 60)

    def test_uses_char_boxes(self):
        """Test that per-character boxes win over interpolation."""
        boxes = (Rect(0, 0, 4, 10), Rect(4, 0, 12, 10), Rect(12, 1, 15, 9), Rect(15, 0, 30, 10))
        fragment = TextFragment("Wide", Rect(0, 0, 30, 10), char_boxes=boxes)

        assert fragment.sub_rect(1, 3) == Rect(4, 0, 15, 10)

    def test_char_boxes_of_vertical_run(self):
        """Test that only the matched characters are covered when text runs downwards."""
        boxes = tuple(Rect(100, 10 * i, 112, 10 * i + 9) for i in range(6))
        fragment = TextFragment("needle", Rect(100, 0, 112, 59), char_boxes=boxes)

        assert fragment.sub_rect(0, 3) == Rect(100, 0, 112, 29)

    def test_mismatched_boxes_ignored(self):
        """Test fallback when boxes do not line up with the text."""
        fragment = TextFragment("abcd", Rect(0, 0, 40, 10), char_boxes=(Rect(0, 0, 1, 10),))

        assert fragment.sub_rect(0, 2) == Rect(0, 0, 20, 10)

    def test_range_clamped(self):
        fragment = TextFragment("abcd", Rect(0, 0, 40, 10))

        assert fragment.sub_rect(-3, 99) == Rect(0, 0, 40, 10)

    @pytest.mark.parametrize("start,end", [(2, 2), (3, 1)])
    def test_empty_range(self, start, end):
        fragment = TextFragment("abcd", Rect(0, 0, 40, 10))

        assert fragment.sub_rect(start, end).width == 0
