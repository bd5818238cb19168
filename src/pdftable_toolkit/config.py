"""
Module: config

Purpose:
    Configuration for a pageable document. Immutable configuration with
    validation on construction: page size, content paddings, fonts and
    footer settings.

Key Classes:
    - DocumentConfig: Page geometry, fonts and footer options

Dependencies:
    - reportlab.lib.pagesizes: Default page size (A4)
    - reportlab.lib.units: Millimetre to point conversion

Used By:
    - controller: PageableDocument
    - layout.cursor: PageCursor.from_config
    - layout.footer: compose_footer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm

A4_WIDTH_PT, A4_HEIGHT_PT = A4

DEFAULT_FONT = "Helvetica"
DEFAULT_BOLD_FONT = "Helvetica-Bold"
DEFAULT_FOOTER_FONT = "Helvetica-Oblique"
DEFAULT_FONT_SIZE = 10.0
DEFAULT_HEADING_FONT_SIZE = 12.0
DEFAULT_FOOTER_FONT_SIZE = 8.0
DEFAULT_PADDING = 5 * mm


@dataclass(frozen=True)
class DocumentConfig:
    """
    Configuration for a pageable document (immutable).

    All lengths are PDF points. Every page has the same size.

    Attributes:
        page_width: Page width
        page_height: Page height
        content_top_padding: Space above the content area
        content_right_padding: Space right of the content area
        content_bottom_padding: Space below the content area (footer included)
        content_left_padding: Space left of the content area
        font: Font for table rows
        bold_font: Font for table header rows
        font_size: Size for table rows and headers
        heading_font: Font for headings
        heading_font_size: Size for headings
        heading_top_padding: Space above a heading
        heading_bottom_padding: Space below a heading
        footer_font: Font for footer lines and the page stamp
        footer_font_size: Size for footer lines and the page stamp
        footer_bottom_padding: Distance of the footer block from page bottom
        footer_lines: Fixed footer text, top line first
        include_page_number: Stamp "N / total" below the footer text

    Example:
        >>> config = DocumentConfig(page_height=800, content_top_padding=10, content_bottom_padding=40)
        >>> config.content_top
        790
        >>> config.available_height
        750
    """

    # Page dimensions
    page_width: float = A4_WIDTH_PT
    page_height: float = A4_HEIGHT_PT

    # Content area
    content_top_padding: float = 0.0
    content_right_padding: float = 0.0
    content_bottom_padding: float = 0.0
    content_left_padding: float = 0.0

    # Table fonts
    font: str = DEFAULT_FONT
    bold_font: str = DEFAULT_BOLD_FONT
    font_size: float = DEFAULT_FONT_SIZE

    # Headings
    heading_font: str = DEFAULT_BOLD_FONT
    heading_font_size: float = DEFAULT_HEADING_FONT_SIZE
    heading_top_padding: float = DEFAULT_PADDING
    heading_bottom_padding: float = DEFAULT_PADDING

    # Footer
    footer_font: str = DEFAULT_FOOTER_FONT
    footer_font_size: float = DEFAULT_FOOTER_FONT_SIZE
    footer_bottom_padding: float = DEFAULT_PADDING
    footer_lines: Tuple[str, ...] = field(default_factory=tuple)
    include_page_number: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        object.__setattr__(self, "footer_lines", tuple(self.footer_lines))

        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        for name in (
            "content_top_padding",
            "content_right_padding",
            "content_bottom_padding",
            "content_left_padding",
            "heading_top_padding",
            "heading_bottom_padding",
            "footer_bottom_padding",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative: {getattr(self, name)}")
        for name in ("font_size", "heading_font_size", "footer_font_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive: {getattr(self, name)}")
        if self.available_width <= 0:
            raise ValueError("Paddings exceed page width")
        if self.available_height <= 0:
            raise ValueError("Paddings exceed page height")

    @property
    def page_size(self) -> Tuple[float, float]:
        """(width, height) tuple for reportlab."""
        return (self.page_width, self.page_height)

    @property
    def content_top(self) -> float:
        """Y coordinate of the top of the content area."""
        return self.page_height - self.content_top_padding

    @property
    def available_width(self) -> float:
        """Width available for content (excluding paddings)."""
        return self.page_width - self.content_left_padding - self.content_right_padding

    @property
    def available_height(self) -> float:
        """Height available for content (excluding paddings)."""
        return self.page_height - self.content_top_padding - self.content_bottom_padding
