"""
Module: layout.models

Purpose:
    Data models for row layout and pagination.
    Immutable dataclasses passed between layout and rendering.

Key Classes:
    - WrappedCell: One cell's wrapped lines
    - LaidOutRow: All cells of a row plus the resolved row height
    - CursorState: Running draw position and current page number

Used By:
    - layout.rows: Creates LaidOutRows
    - layout.cursor: Creates CursorStates
    - output.row_renderer: Consumes both
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class WrappedCell:
    """
    Wrapped lines of a single cell (immutable).

    Attributes:
        lines: Lines in draw order, at least one

    Example:
        >>> WrappedCell(("Fancy Product", "with long name")).line_count
        2
    """

    lines: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))
        if not self.lines:
            raise ValueError("a wrapped cell has at least one line")

    @classmethod
    def of(cls, lines: Iterable[str]) -> "WrappedCell":
        return cls(tuple(lines))

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class LaidOutRow:
    """
    A table row ready to draw (immutable).

    Attributes:
        cells: One WrappedCell per column, in column order
        line_height: Height of one text line
        height: Resolved row height, padding included
        font: Row font (columns may override it when drawn)
        font_size: Font size for every cell
        is_header: Header rows get the header background and ignore
            column alignment
    """

    cells: Tuple[WrappedCell, ...]
    line_height: float
    height: float
    font: str
    font_size: float
    is_header: bool = False

    @property
    def max_line_count(self) -> int:
        """Line count of the tallest cell."""
        return max(cell.line_count for cell in self.cells)


@dataclass(frozen=True)
class CursorState:
    """
    Running draw position (immutable).

    Coordinates follow PDF conventions: origin at the page's bottom-left
    corner, y grows upwards. While drawing rows, y is the top edge of the
    next row.

    Attributes:
        x: Horizontal position
        y: Vertical position
        page_number: 1-based number of the open page, 0 before the first
            page is opened

    Example:
        >>> CursorState(x=20, y=800).has_page
        False
    """

    x: float
    y: float
    page_number: int = 0

    @property
    def has_page(self) -> bool:
        """Whether a page has been opened."""
        return self.page_number > 0

    def moved_to(self, x: float, y: float) -> "CursorState":
        """Same page, new position."""
        return CursorState(x=x, y=y, page_number=self.page_number)
