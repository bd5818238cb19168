"""
Module: output.primitives

Purpose:
    Drawing primitives recorded on a page, and the page that holds them.

Key Classes:
    - FillRect: Filled rectangle (bottom-left corner, size, color)
    - StrokeLine: Straight line segment
    - DrawText: One line of text at a baseline position
    - Page: Ordered content primitives plus footer primitives

Dependencies:
    - reportlab.lib.colors: Fill colors

Used By:
    - output.canvas: PageBuffer records primitives onto Pages
    - output.row_renderer: Plans rows as primitives
    - output.renderer: Replays Pages into a PDF
    - layout.footer: Footer placements
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from reportlab.lib.colors import Color


@dataclass(frozen=True)
class FillRect:
    """Filled rectangle; (x, y) is the bottom-left corner."""

    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class StrokeLine:
    """Line segment from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class DrawText:
    """
    One line of text; (x, y) is the start of the baseline.

    Example:
        >>> DrawText(x=20, y=700, text="Item 1", font="Helvetica", size=10).text
        'Item 1'
    """

    x: float
    y: float
    text: str
    font: str
    size: float


Primitive = Union[FillRect, StrokeLine, DrawText]


@dataclass
class Page:
    """
    One page of the document.

    Content primitives are appended while the page is open. Once closed,
    only header and footer stamps may be added (during document
    finalization).

    Attributes:
        index: Page index (0-indexed)
        width: Page width
        height: Page height
        content: Content primitives in draw order
        footer: Header and footer stamps, drawn after content
        closed: Whether content drawing has finished
        crop_box: Visible area (x1, y1, x2, y2), or None for the whole page
    """

    index: int
    width: float
    height: float
    content: List[Primitive] = field(default_factory=list)
    footer: List[Primitive] = field(default_factory=list)
    closed: bool = False
    crop_box: Optional[Tuple[float, float, float, float]] = None

    @property
    def number(self) -> int:
        """1-based page number."""
        return self.index + 1

    @property
    def texts(self) -> List[DrawText]:
        """Every text primitive on the page, content then footer."""
        return [p for p in self.content + self.footer if isinstance(p, DrawText)]
