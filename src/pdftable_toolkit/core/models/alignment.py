"""
Module: core.models.alignment

Purpose:
    Closed enums for horizontal and vertical text alignment inside a
    table cell, plus the offset functions that turn an alignment into a
    distance from the cell edge.

Key Classes:
    - TextAlignment: LEFT / CENTER / RIGHT
    - VerticalAlignment: TOP / MIDDLE / BOTTOM

Key Functions:
    - horizontal_offset(): Distance from cell left edge to line start
    - vertical_offset(): Distance from cell top edge to first line top

Used By:
    - core.models.column: Column alignment fields
    - layout.rows: Overlap heuristic preconditions
    - output.row_renderer: Line placement
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Dict, Type


class TextAlignment(Enum):
    """Horizontal alignment of each line inside its column."""

    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


class VerticalAlignment(Enum):
    """Vertical alignment of a cell's line block inside its row."""

    TOP = auto()
    MIDDLE = auto()
    BOTTOM = auto()


# (column_width, line_width, cell_padding) -> offset from cell left
_HORIZONTAL_OFFSETS: Dict[TextAlignment, Callable[[float, float, float], float]] = {
    TextAlignment.LEFT: lambda column_width, line_width, padding: padding,
    TextAlignment.CENTER: lambda column_width, line_width, padding: (column_width - line_width) / 2,
    TextAlignment.RIGHT: lambda column_width, line_width, padding: column_width - line_width - padding,
}

# (row_height, block_height, cell_padding) -> offset from cell top
_VERTICAL_OFFSETS: Dict[VerticalAlignment, Callable[[float, float, float], float]] = {
    VerticalAlignment.TOP: lambda row_height, block_height, padding: padding,
    VerticalAlignment.MIDDLE: lambda row_height, block_height, padding: row_height - padding - block_height / 2,
    VerticalAlignment.BOTTOM: lambda row_height, block_height, padding: row_height - padding - block_height,
}


def _check_total(offsets: Dict, alignment_type: Type[Enum]) -> None:
    """Raise if an alignment member has no offset function."""
    missing = [member.name for member in alignment_type if member not in offsets]
    if missing:
        raise NotImplementedError(
            f"{alignment_type.__name__} has no offset for: {', '.join(missing)}"
        )


_check_total(_HORIZONTAL_OFFSETS, TextAlignment)
_check_total(_VERTICAL_OFFSETS, VerticalAlignment)


def horizontal_offset(
    alignment: TextAlignment,
    column_width: float,
    line_width: float,
    cell_padding: float,
) -> float:
    """
    Offset from the cell's left edge to where a line starts.

    Args:
        alignment: Column alignment
        column_width: Full column width (padding included)
        line_width: Measured width of the line
        cell_padding: Table cell inside padding

    Returns:
        Offset in points (may be negative for overflowing lines)

    Example:
        >>> horizontal_offset(TextAlignment.RIGHT, 100, 30, 3)
        67
    """
    return _HORIZONTAL_OFFSETS[alignment](column_width, line_width, cell_padding)


def vertical_offset(
    alignment: VerticalAlignment,
    row_height: float,
    line_height: float,
    number_of_lines: int,
    cell_padding: float,
) -> float:
    """
    Offset from the cell's top edge to the top of the first line.

    Args:
        alignment: Column vertical alignment
        row_height: Resolved row height (padding included)
        line_height: Height of one line
        number_of_lines: Lines in this cell
        cell_padding: Table cell inside padding

    Returns:
        Offset in points, measured downwards
    """
    return _VERTICAL_OFFSETS[alignment](row_height, line_height * number_of_lines, cell_padding)
