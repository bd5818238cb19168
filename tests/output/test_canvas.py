"""
Unit tests for the in-memory PageBuffer canvas.
"""

import pytest
from reportlab.lib import colors

from pdftable_toolkit.output import (
    DrawText,
    FillRect,
    PageBuffer,
    PageSequenceError,
    StrokeLine,
)


class TestPageBuffer:
    """Tests for page lifecycle and primitive recording."""

    def test_draw_when_page_open_then_primitives_recorded_in_order(self):
        buffer = PageBuffer()
        page = buffer.open_page(600, 800)

        buffer.fill_rect(0, 0, 10, 10, colors.red)
        buffer.stroke_line(0, 0, 10, 0)
        buffer.draw_text(5, 5, "Hello", "Helvetica", 10)

        assert page.content == [
            FillRect(0, 0, 10, 10, colors.red),
            StrokeLine(0, 0, 10, 0),
            DrawText(5, 5, "Hello", "Helvetica", 10),
        ]
        assert page.texts == [DrawText(5, 5, "Hello", "Helvetica", 10)]

    def test_open_when_previous_closed_then_pages_numbered_in_order(self):
        buffer = PageBuffer()
        first = buffer.open_page(600, 800)
        buffer.close_page(first)
        second = buffer.open_page(600, 800)

        assert [p.number for p in buffer.pages] == [1, 2]
        assert buffer.current_page is second
        assert first.closed is True
        assert second.closed is False

    def test_open_when_page_still_open_then_raises(self):
        buffer = PageBuffer()
        buffer.open_page(600, 800)

        with pytest.raises(PageSequenceError):
            buffer.open_page(600, 800)

    def test_draw_when_no_page_open_then_raises(self):
        buffer = PageBuffer()

        with pytest.raises(PageSequenceError, match="no open page"):
            buffer.draw_text(0, 0, "x", "Helvetica", 10)

    def test_draw_when_page_closed_then_raises(self):
        buffer = PageBuffer()
        page = buffer.open_page(600, 800)
        buffer.close_page(page)

        with pytest.raises(PageSequenceError):
            buffer.stroke_line(0, 0, 1, 1)

    def test_close_when_not_open_page_then_raises(self):
        buffer = PageBuffer()
        page = buffer.open_page(600, 800)
        buffer.close_page(page)

        with pytest.raises(PageSequenceError):
            buffer.close_page(page)

    def test_stamp_when_page_closed_then_added_to_footer(self):
        buffer = PageBuffer()
        page = buffer.open_page(600, 800)
        buffer.draw_text(0, 700, "body", "Helvetica", 10)
        buffer.close_page(page)

        buffer.stamp(page, [DrawText(290, 20, "1 / 1", "Helvetica-Oblique", 8)])

        assert [t.text for t in page.content] == ["body"]
        assert [t.text for t in page.footer] == ["1 / 1"]
        assert [t.text for t in page.texts] == ["body", "1 / 1"]

    def test_stamp_when_page_open_then_raises(self):
        buffer = PageBuffer()
        page = buffer.open_page(600, 800)

        with pytest.raises(PageSequenceError, match="still open"):
            buffer.stamp(page, [])

    def test_pages_when_read_then_snapshot_tuple(self):
        buffer = PageBuffer()
        buffer.open_page(600, 800)

        pages = buffer.pages

        assert isinstance(pages, tuple)
        assert len(pages) == 1

    def test_crop_when_page_open_then_crop_box_stored(self):
        buffer = PageBuffer()
        page = buffer.open_page(600, 800)

        buffer.crop_page(page, [0, 400, 600, 800])

        assert page.crop_box == (0, 400, 600, 800)

    def test_crop_when_page_closed_then_raises(self):
        buffer = PageBuffer()
        page = buffer.open_page(600, 800)
        buffer.close_page(page)

        with pytest.raises(PageSequenceError, match="not the open page"):
            buffer.crop_page(page, (0, 400, 600, 800))

    def test_page_sequence_error_is_runtime_error(self):
        assert issubclass(PageSequenceError, RuntimeError)
