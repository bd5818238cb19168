"""
Module: core.models.column

Purpose:
    Column definition for a table: width, alignment and styling.

Key Classes:
    - Column: Immutable column definition

Dependencies:
    - reportlab.lib.colors: Background colors

Used By:
    - core.models.table: Table.columns
    - layout.rows: Content width and overlap rules
    - output.row_renderer: Backgrounds, grid and line placement
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from reportlab.lib.colors import Color

from .alignment import TextAlignment, VerticalAlignment


@dataclass(frozen=True)
class Column:
    """
    A table column (immutable).

    Columns are drawn left to right in the order the table lists them.

    Attributes:
        width: Column width in points, padding included
        header: Header text (None renders an empty header cell)
        alignment: Horizontal alignment of each line
        vertical_alignment: Vertical alignment of the cell's line block
        background_color: Fill color for every cell in this column
        font: Font name overriding the row font for this column
        hide_grid: Suppress grid lines around this column
        overlap_next_column: Let this column's text spill into the next
            column when that one is RIGHT/BOTTOM aligned and single-line

    Example:
        >>> qty = Column(25, header="Qty", alignment=TextAlignment.CENTER)
        >>> qty.width
        25
    """

    width: float
    header: Optional[str] = None
    alignment: TextAlignment = TextAlignment.LEFT
    vertical_alignment: VerticalAlignment = VerticalAlignment.TOP
    background_color: Optional[Color] = None
    font: Optional[str] = None
    hide_grid: bool = False
    overlap_next_column: bool = False

    def __post_init__(self) -> None:
        """Validate column on construction."""
        if self.width <= 0:
            raise ValueError(f"width must be positive: {self.width}")

    @property
    def draws_grid(self) -> bool:
        """Whether grid lines are drawn around this column."""
        return not self.hide_grid

    def content_width(self, cell_padding: float) -> float:
        """Width left for text once padding is removed on both sides."""
        return self.width - 2 * cell_padding
