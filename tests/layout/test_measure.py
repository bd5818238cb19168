"""
Unit tests for the ReportLab-backed text measurer.
"""

import pytest

from pdftable_toolkit import Column, DocumentConfig, PageableDocument, Table
from pdftable_toolkit.layout import ReportLabMeasurer


class TestReportLabMeasurer:
    """Tests for ReportLabMeasurer against the standard Type 1 fonts."""

    def test_width_when_empty_then_zero(self):
        assert ReportLabMeasurer().width("", "Helvetica", 10) == 0

    def test_width_when_text_then_scales_with_size(self):
        measurer = ReportLabMeasurer()

        small = measurer.width("Hello", "Helvetica", 10)
        large = measurer.width("Hello", "Helvetica", 20)

        assert small > 0
        assert large == pytest.approx(2 * small)

    def test_width_when_bold_then_wider(self):
        measurer = ReportLabMeasurer()

        assert measurer.width("Hello", "Helvetica-Bold", 10) > measurer.width("Hello", "Helvetica", 10)

    def test_line_height_when_helvetica_then_ascent_minus_descent(self):
        """Helvetica ascent is 718 and descent -207 units per 1000."""
        assert ReportLabMeasurer().line_height("Helvetica", 10) == pytest.approx(9.25)

    @pytest.mark.parametrize("font", [
        "Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Times-Roman", "Courier",
    ])
    def test_line_height_when_standard_font_then_positive_and_scales(self, font):
        measurer = ReportLabMeasurer()

        height = measurer.line_height(font, 10)

        assert height > 0
        assert measurer.line_height(font, 20) == pytest.approx(2 * height)

    def test_line_height_when_font_unknown_then_raises(self):
        with pytest.raises(Exception):
            ReportLabMeasurer().line_height("No-Such-Font", 10)


class TestReportLabMeasurerInDocument:
    """Default documents measure with the standard fonts of DocumentConfig."""

    def test_document_when_default_fonts_then_heading_and_table_drawn(self):
        document = PageableDocument(DocumentConfig(content_top_padding=10, content_bottom_padding=40))

        document.draw_heading("Orders")
        document.draw_table(Table(columns=(Column(100, "Name"),), rows=(("x",),), draw_headers=True))

        texts = [t.text for t in document.close()[0].texts]
        assert texts == ["Orders", "Name", "x"]
