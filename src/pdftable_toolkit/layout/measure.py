"""
Module: layout.measure

Purpose:
    Text measurement interface used by every layout step, and the
    reportlab implementation backed by font metrics.

Key Classes:
    - TextMeasurer: Abstract width / line-height provider
    - ReportLabMeasurer: Measures with reportlab pdfmetrics

Dependencies:
    - reportlab.pdfbase.pdfmetrics: String widths, ascent and descent

Used By:
    - layout.wrapper: Greedy wrapping
    - layout.rows: Row height
    - layout.footer: Footer centering
    - output.row_renderer: Line alignment
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from reportlab.pdfbase import pdfmetrics


class TextMeasurer(ABC):
    """
    Abstract interface for measuring text.

    Implementations must be pure: the same arguments always give the
    same answer, or always raise the same error.
    """

    @abstractmethod
    def width(self, text: str, font: str, size: float) -> float:
        """
        Width of a single line of text.

        Args:
            text: Text to measure
            font: Font name
            size: Font size in points

        Returns:
            Width in points
        """

    @abstractmethod
    def line_height(self, font: str, size: float) -> float:
        """
        Height of one line of text for a font and size.

        Args:
            font: Font name
            size: Font size in points

        Returns:
            Line height in points
        """


class ReportLabMeasurer(TextMeasurer):
    """
    Measurer using reportlab's registered font metrics.

    The line height is the distance from the font descent to its ascent
    at the given size. Fonts must be registered with pdfmetrics before
    use. The standard 14 PDF fonts are always available. Errors raised by
    reportlab for unknown fonts propagate unchanged.

    Example:
        >>> measurer = ReportLabMeasurer()
        >>> round(measurer.line_height("Helvetica", 10), 2)
        9.25
    """

    def width(self, text: str, font: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, font, size)

    def line_height(self, font: str, size: float) -> float:
        ascent, descent = pdfmetrics.getAscentDescent(font, size)
        return ascent - descent
