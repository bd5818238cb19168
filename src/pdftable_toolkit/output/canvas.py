"""
Module: output.canvas

Purpose:
    Narrow drawing interface the layout core draws through, and the
    in-memory page buffer that implements it.

Key Classes:
    - Canvas: Abstract drawing and page-sequence interface
    - PageBuffer: Records primitives onto an append-only page sequence
    - PageSequenceError: Drawing or cropping outside the page lifecycle

Algorithm:
    Pages are strictly ordered. open_page() is only allowed once the
    previous page is closed, and nothing is drawn onto a closed page
    except footer stamps.

Dependencies:
    - reportlab.lib.colors: Fill colors
    - output.primitives: Page and primitives

Used By:
    - controller: PageableDocument
    - output.row_renderer: RowRenderer.draw
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from reportlab.lib.colors import Color

from .primitives import DrawText, FillRect, Page, Primitive, StrokeLine

logger = logging.getLogger(__name__)


class PageSequenceError(RuntimeError):
    """Drawing without an open page, or onto a page that is already closed."""


class Canvas(ABC):
    """
    Abstract drawing surface over a sequence of fixed-size pages.

    Drawing calls apply to the currently open page. Implementations
    report their own failures by raising; callers never swallow them.
    """

    @abstractmethod
    def open_page(self, width: float, height: float) -> Page:
        """
        Open the next page.

        Raises:
            PageSequenceError: If the previous page is still open
        """

    @abstractmethod
    def close_page(self, page: Page) -> None:
        """
        Finish drawing content on a page.

        Raises:
            PageSequenceError: If page is not the open page
        """

    @abstractmethod
    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Fill a rectangle whose bottom-left corner is (x, y)."""

    @abstractmethod
    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Stroke a line segment."""

    @abstractmethod
    def draw_text(self, x: float, y: float, text: str, font: str, size: float) -> None:
        """Draw one line of text with its baseline starting at (x, y)."""

    @abstractmethod
    def crop_page(self, page: Page, box: Tuple[float, float, float, float]) -> None:
        """
        Restrict the visible area of a page to box (x1, y1, x2, y2).

        Raises:
            PageSequenceError: If page is not the open page
        """

    @abstractmethod
    def stamp(self, page: Page, primitives: Sequence[Primitive]) -> None:
        """
        Add footer primitives to a closed page.

        Raises:
            PageSequenceError: If page is still open
        """

    @property
    @abstractmethod
    def pages(self) -> Sequence[Page]:
        """All pages opened so far, in order."""


class PageBuffer(Canvas):
    """
    In-memory canvas: every drawing call becomes a primitive on the open
    page. The recorded pages are written to PDF by output.renderer.

    Example:
        >>> buffer = PageBuffer()
        >>> page = buffer.open_page(595, 842)
        >>> buffer.draw_text(20, 800, "Hello", "Helvetica", 10)
        >>> buffer.close_page(page)
        >>> len(buffer.pages[0].content)
        1
    """

    def __init__(self) -> None:
        self._pages: List[Page] = []
        self._open: Optional[Page] = None

    @property
    def pages(self) -> Sequence[Page]:
        return tuple(self._pages)

    @property
    def current_page(self) -> Optional[Page]:
        """The open page, if any."""
        return self._open

    def open_page(self, width: float, height: float) -> Page:
        if self._open is not None:
            raise PageSequenceError(
                f"page {self._open.number} must be closed before opening another"
            )
        page = Page(index=len(self._pages), width=width, height=height)
        self._pages.append(page)
        self._open = page
        return page

    def close_page(self, page: Page) -> None:
        if page is not self._open:
            raise PageSequenceError(f"page {page.number} is not the open page")
        page.closed = True
        self._open = None
        logger.debug(f"Closed page {page.number} with {len(page.content)} primitives")

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        self._append(FillRect(x=x, y=y, width=width, height=height, color=color))

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._append(StrokeLine(x1=x1, y1=y1, x2=x2, y2=y2))

    def draw_text(self, x: float, y: float, text: str, font: str, size: float) -> None:
        self._append(DrawText(x=x, y=y, text=text, font=font, size=size))

    def crop_page(self, page: Page, box: Tuple[float, float, float, float]) -> None:
        if page is not self._open:
            raise PageSequenceError(f"page {page.number} is not the open page")
        page.crop_box = tuple(box)

    def stamp(self, page: Page, primitives: Sequence[Primitive]) -> None:
        if not page.closed:
            raise PageSequenceError(f"page {page.number} is still open")
        page.footer.extend(primitives)

    def _append(self, primitive: Primitive) -> None:
        if self._open is None:
            raise PageSequenceError("no open page to draw on")
        self._open.content.append(primitive)
