"""
Module: layout.cursor

Purpose:
    Page-advance protocol for a single running cursor. Decides, before a
    block of a given height is drawn, whether the current page is full
    and a new page must begin.

Key Classes:
    - PageCursor: Page geometry plus pure cursor transitions

Algorithm:
    States: NONE (page_number == 0) and ACTIVE (page_number >= 1).
    1. NONE -> ACTIVE: the first ensure_fits opens page 1 lazily, no fit check
    2. ACTIVE -> ACTIVE(next page): y - needed < bottom boundary
       -> page_number + 1, cursor back to the content top-left
    3. A block that does not fit on an empty page stays there (warning)
    Pages only move forward; a block is never split across pages.

Dependencies:
    - layout.models: CursorState
    - config: DocumentConfig

Used By:
    - controller: PageableDocument
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pdftable_toolkit.config import DocumentConfig

from .models import CursorState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageCursor:
    """
    Page geometry and cursor transitions (immutable).

    Every method takes a CursorState and returns a new one; the cursor
    itself holds no mutable state.

    Attributes:
        page_width: Page width
        page_height: Page height
        top_padding: Space above the content area
        bottom_padding: Lowest y a block may reach
        left_padding: x of the content area's left edge

    Example:
        >>> cursor = PageCursor(page_width=600, page_height=800, top_padding=10,
        ...                     bottom_padding=40, left_padding=20)
        >>> state = cursor.ensure_fits(cursor.start(), 30)
        >>> (state.x, state.y, state.page_number)
        (20, 790, 1)
    """

    page_width: float
    page_height: float
    top_padding: float = 0.0
    bottom_padding: float = 0.0
    left_padding: float = 0.0

    @classmethod
    def from_config(cls, config: DocumentConfig) -> "PageCursor":
        return cls(
            page_width=config.page_width,
            page_height=config.page_height,
            top_padding=config.content_top_padding,
            bottom_padding=config.content_bottom_padding,
            left_padding=config.content_left_padding,
        )

    @property
    def content_top(self) -> float:
        """y of the top edge of the content area."""
        return self.page_height - self.top_padding

    @property
    def content_height(self) -> float:
        """Vertical space between the top and bottom paddings."""
        return self.content_top - self.bottom_padding

    def start(self) -> CursorState:
        """Initial cursor: content top-left, no page opened yet."""
        return CursorState(x=self.left_padding, y=self.content_top, page_number=0)

    def position_at_page_top(self, state: CursorState) -> CursorState:
        """Move to the content top-left of the current page."""
        return state.moved_to(self.left_padding, self.content_top)

    def advance(self, state: CursorState, dx: float = 0.0, dy: float = 0.0) -> CursorState:
        """Move right by dx and down the page by dy."""
        return state.moved_to(state.x + dx, state.y - dy)

    def fits(self, state: CursorState, needed_height: float) -> bool:
        """Whether a block of needed_height fits below the cursor."""
        return state.y - needed_height >= self.bottom_padding

    def ensure_fits(self, state: CursorState, needed_height: float) -> CursorState:
        """
        Make room for a block of needed_height.

        Args:
            state: Current cursor
            needed_height: Height of the block about to be drawn

        Returns:
            The cursor to draw the block at. A higher page_number than the
            input means the caller must close the current page and open
            the next one.
        """
        if not state.has_page:
            return CursorState(x=state.x, y=state.y, page_number=1)

        if self.fits(state, needed_height):
            return state

        if state.y >= self.content_top:
            logger.warning(
                f"Block overflows page {state.page_number}: "
                f"{needed_height:.2f}pt needed, {self.content_height:.2f}pt available"
            )
            return state

        logger.debug(
            f"Page {state.page_number} full at y={state.y:.2f}, "
            f"starting page {state.page_number + 1} for {needed_height:.2f}pt"
        )
        return CursorState(
            x=self.left_padding,
            y=self.content_top,
            page_number=state.page_number + 1,
        )
