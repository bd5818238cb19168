"""
Module: controller

Purpose:
    Orchestrate laying out headings and tables onto pages.
    Layout -> Fit check -> Draw -> Advance, then footers over all pages.

Key Classes:
    - PageableDocument: Document built from a config, a measurer and a canvas

Dependencies:
    - layout: Row layout, page cursor, footers
    - output: Page buffer, row renderer, PDF writer

Used By:
    - Library callers building table documents
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, Union

from .config import DocumentConfig
from .core.models import Table
from .layout import (
    CursorState,
    LaidOutRow,
    PageCursor,
    ReportLabMeasurer,
    TextMeasurer,
    compose_footer,
    layout_header,
    layout_row,
)
from .output import Canvas, Page, PageBuffer, PageSequenceError, Primitive, RowRenderer, render_to_pdf

logger = logging.getLogger(__name__)


class PageableDocument:
    """
    A document that flows headings and tables across fixed-size pages.

    The document owns one cursor and one canvas; use a separate instance
    per document. Pages are opened lazily on the first draw and footers
    are stamped on every page when the document is closed, once the page
    count is known.

    Example:
        >>> document = PageableDocument(DocumentConfig(
        ...     content_left_padding=20,
        ...     content_top_padding=10,
        ...     content_bottom_padding=40,
        ...     footer_lines=("Example document",),
        ...     include_page_number=True,
        ... ))
        >>> document.draw_heading("Orders")
        >>> document.draw_table(table)
        >>> document.save(Path("orders.pdf"))
    """

    def __init__(
        self,
        config: Optional[DocumentConfig] = None,
        *,
        measurer: Optional[TextMeasurer] = None,
        canvas: Optional[Canvas] = None,
    ) -> None:
        self._config = config or DocumentConfig()
        self._measurer = measurer or ReportLabMeasurer()
        self._canvas = canvas or PageBuffer()
        self._page_cursor = PageCursor.from_config(self._config)
        self._cursor = self._page_cursor.start()
        self._current_page: Optional[Page] = None
        self._closed = False

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def config(self) -> DocumentConfig:
        return self._config

    @property
    def cursor(self) -> CursorState:
        """Current draw position."""
        return self._cursor

    @property
    def pages(self) -> Sequence[Page]:
        return self._canvas.pages

    @property
    def page_count(self) -> int:
        return len(self._canvas.pages)

    @property
    def is_closed(self) -> bool:
        return self._closed

    # ─────────────────────────────────────────────────────────────────────────
    # Cursor
    # ─────────────────────────────────────────────────────────────────────────

    def position_at_page_top(self) -> None:
        """Move the cursor to the content top-left corner."""
        self._cursor = self._page_cursor.position_at_page_top(self._cursor)

    def move_to(self, x: float, y: float) -> None:
        """Move the cursor to an explicit position on the current page."""
        self._cursor = self._cursor.moved_to(x, y)

    # ─────────────────────────────────────────────────────────────────────────
    # Drawing
    # ─────────────────────────────────────────────────────────────────────────

    def draw_heading(self, heading: str) -> None:
        """
        Draw a heading at the content left edge.

        The heading is preceded by heading_top_padding, and the cursor ends
        heading_bottom_padding + heading_top_padding below its baseline.

        Args:
            heading: Heading text
        """
        config = self._config
        heading_height = self._measurer.line_height(config.heading_font, config.heading_font_size)
        self._ensure_fits(heading_height)

        left = config.content_left_padding
        baseline = self._cursor.y - config.heading_top_padding - heading_height
        self._canvas.draw_text(left, baseline, heading, config.heading_font, config.heading_font_size)

        self._cursor = self._cursor.moved_to(
            left,
            baseline - config.heading_bottom_padding - config.heading_top_padding,
        )

    def draw_table(
        self,
        table: Table,
        x: Optional[float] = None,
        y: Optional[float] = None,
    ) -> None:
        """
        Draw a table with its top-left corner at (x, y).

        Defaults to the current cursor position. Rows that do not fit on
        the current page move whole to the next page.

        Args:
            table: Table to draw
            x: Left edge (default: cursor x)
            y: Top edge (default: cursor y)

        Raises:
            PageSequenceError: If the document is already closed
        """
        self._check_open()
        self._cursor = self._cursor.moved_to(
            self._cursor.x if x is None else x,
            self._cursor.y if y is None else y,
        )

        config = self._config
        renderer = RowRenderer(table, self._measurer)

        if table.draw_headers:
            header = layout_header(table, config.bold_font, config.font_size, self._measurer)
            self._draw_row(renderer, header)

        for cells in table.rows:
            row = layout_row(table, cells, config.font, config.font_size, self._measurer)
            self._draw_row(renderer, row)

        logger.debug(
            f"Drew table with {table.row_count} rows, now on page {self._cursor.page_number}"
        )

    def _draw_row(self, renderer: RowRenderer, row: LaidOutRow) -> None:
        self._ensure_fits(row.height)
        self._cursor = renderer.draw(self._canvas, row, self._cursor)

    def _ensure_fits(self, needed_height: float) -> None:
        """Advance the cursor and sync the canvas when a page starts."""
        self._check_open()
        previous = self._cursor
        self._cursor = self._page_cursor.ensure_fits(previous, needed_height)

        if self._cursor.page_number == previous.page_number:
            return
        if self._current_page is not None:
            self._canvas.close_page(self._current_page)
        self._current_page = self._canvas.open_page(self._config.page_width, self._config.page_height)

    def crop_current_page(self) -> None:
        """
        Crop the open page one row-font line below the cursor.

        The page keeps its full width and top edge; everything below
        the cut is hidden in the written PDF.

        Raises:
            PageSequenceError: If no page is open
        """
        self._check_open()
        if self._current_page is None:
            raise PageSequenceError("no open page to crop")

        config = self._config
        line_height = self._measurer.line_height(config.font, config.font_size)
        bottom = max(0.0, self._cursor.y - line_height)
        self._canvas.crop_page(self._current_page, (0.0, bottom, config.page_width, config.page_height))
        logger.debug(f"Cropped page {self._current_page.number} at y={bottom:.2f}")

    def _check_open(self) -> None:
        if self._closed:
            raise PageSequenceError("document is closed")

    # ─────────────────────────────────────────────────────────────────────────
    # Finalization
    # ─────────────────────────────────────────────────────────────────────────

    def close(self) -> Sequence[Page]:
        """
        Close the current page and stamp headers and footers on every page.

        Safe to call more than once.

        Returns:
            All pages, in order
        """
        if self._closed:
            return self._canvas.pages

        if self._current_page is not None:
            self._canvas.close_page(self._current_page)
            self._current_page = None
        self._closed = True

        pages = self._canvas.pages
        config = self._config
        draws_footer = bool(config.footer_lines) or config.include_page_number
        for page in pages:
            primitives = list(self.page_header(page, len(pages)))
            if draws_footer:
                primitives.extend(compose_footer(
                    page.number,
                    len(pages),
                    config.footer_lines,
                    config.include_page_number,
                    self._measurer,
                    config,
                ))
            if primitives:
                self._canvas.stamp(page, primitives)

        logger.info(f"Closed document with {len(pages)} pages")
        return pages

    def page_header(self, page: Page, page_count: int) -> Sequence[Primitive]:
        """
        Header primitives for one page, stamped before the footer on close.

        No header by default. Subclasses override this and reserve room
        for it with content_top_padding.

        Args:
            page: Closed page being finalized
            page_count: Total pages in the document
        """
        return ()

    def save(self, output: Union[Path, str, BinaryIO]) -> None:
        """
        Close the document (if needed) and write it as PDF.

        Args:
            output: Path to write, or a binary file object
        """
        render_to_pdf(self.close(), output)

    def to_bytes(self) -> bytes:
        """Close the document (if needed) and return the PDF bytes."""
        buffer = io.BytesIO()
        self.save(buffer)
        return buffer.getvalue()
