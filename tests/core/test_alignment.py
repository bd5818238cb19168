"""
Unit tests for alignment offsets.

Every enum member must map to an offset; no member may fall through to zero.
"""

import pytest

from pdftable_toolkit.core.models import (
    TextAlignment,
    VerticalAlignment,
    horizontal_offset,
    vertical_offset,
)
from pdftable_toolkit.core.models.alignment import _check_total


class TestHorizontalOffset:
    """Tests for horizontal_offset()."""

    def test_left_when_padding_then_offset_is_padding(self):
        assert horizontal_offset(TextAlignment.LEFT, 100, 40, 3) == 3

    def test_center_when_line_narrower_then_centered_ignoring_padding(self):
        assert horizontal_offset(TextAlignment.CENTER, 100, 40, 3) == 30

    def test_right_when_padding_then_flush_right_inside_padding(self):
        assert horizontal_offset(TextAlignment.RIGHT, 100, 40, 3) == 57

    @pytest.mark.parametrize("alignment", list(TextAlignment))
    def test_every_member_when_mapped_then_returns_number(self, alignment):
        """Mapping is total over the enum."""
        assert isinstance(horizontal_offset(alignment, 100, 40, 3), (int, float))


class TestVerticalOffset:
    """Tests for vertical_offset()."""

    def test_top_when_padding_then_offset_is_padding(self):
        assert vertical_offset(VerticalAlignment.TOP, 46, 10, 2, 3) == 3

    def test_middle_when_two_lines_then_row_minus_padding_minus_half_block(self):
        # 46 - 3 - (10 * 2) / 2
        assert vertical_offset(VerticalAlignment.MIDDLE, 46, 10, 2, 3) == 33

    def test_bottom_when_two_lines_then_block_ends_at_bottom_padding(self):
        # 46 - 3 - 10 * 2
        assert vertical_offset(VerticalAlignment.BOTTOM, 46, 10, 2, 3) == 23

    @pytest.mark.parametrize("alignment", list(VerticalAlignment))
    def test_every_member_when_mapped_then_returns_number(self, alignment):
        """Mapping is total over the enum."""
        assert isinstance(vertical_offset(alignment, 46, 10, 2, 3), (int, float))


class TestOffsetTotality:
    """Tests for the import-time check that every member has an offset."""

    def test_check_when_member_missing_then_raises(self):
        partial = {TextAlignment.LEFT: lambda *args: 0}

        with pytest.raises(NotImplementedError, match="CENTER, RIGHT"):
            _check_total(partial, TextAlignment)

    def test_check_when_all_members_mapped_then_passes(self):
        _check_total({member: lambda *args: 0 for member in VerticalAlignment}, VerticalAlignment)
