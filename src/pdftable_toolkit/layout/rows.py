"""
Module: layout.rows

Purpose:
    Lay out one table row (or the header row): wrap every cell, apply the
    single-column overlap heuristic and reconcile all cells to one row
    height.

Key Functions:
    - layout_row(): Lay out a content row
    - layout_header(): Lay out the header row

Algorithm:
    For each column i:
    1. content width = column width - 2 x cell padding
    2. Wrap the cell with the column font (or the row font)
    3. If column i overlaps the next column, try to widen the wrap into
       column i+1 (see _wrap_overlapping_cell)
    Row height = max line count x line height + 2 x cell padding

    The overlap heuristic only handles a RIGHT/BOTTOM aligned, single-line
    neighbour, one column ahead. Every other case falls back to normal
    wrapping.

Dependencies:
    - layout.wrapper: wrap_text
    - layout.measure: TextMeasurer
    - core.models: Table, Column, alignment enums

Used By:
    - controller: PageableDocument.draw_table
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pdftable_toolkit.core.models import (
    Column,
    Table,
    TextAlignment,
    VerticalAlignment,
    check_row_shape,
)

from .measure import TextMeasurer
from .models import LaidOutRow, WrappedCell
from .wrapper import wrap_text

logger = logging.getLogger(__name__)


def layout_row(
    table: Table,
    cells: Sequence[Optional[str]],
    font: str,
    size: float,
    measurer: TextMeasurer,
    *,
    is_header: bool = False,
) -> LaidOutRow:
    """
    Wrap every cell of a row and resolve the row height.

    Args:
        table: Table the row belongs to (columns and padding)
        cells: One text (or None) per column
        font: Row font
        size: Font size in points
        measurer: Text measurer
        is_header: Lay out as a header row (no column overlap)

    Returns:
        LaidOutRow with one WrappedCell per column

    Raises:
        ShapeMismatchError: If the cell count differs from the column count
        TypeError: If cells is a string

    Example:
        >>> row = layout_row(table, ["Widget", "3"], "Helvetica", 10, measurer)
        >>> row.height == row.max_line_count * row.line_height + 2 * table.cell_inside_padding
        True
    """
    check_row_shape(cells, len(table.columns))

    wrapped: List[WrappedCell] = []
    for index, column in enumerate(table.columns):
        if is_header:
            lines = _wrap_cell(table, column, cells[index], font, size, measurer)
        else:
            lines = _wrap_content_cell(table, cells, index, font, size, measurer)
        wrapped.append(WrappedCell.of(lines))

    line_height = measurer.line_height(font, size)
    necessary_lines = max(cell.line_count for cell in wrapped)
    row_height = necessary_lines * line_height + 2 * table.cell_inside_padding

    return LaidOutRow(
        cells=tuple(wrapped),
        line_height=line_height,
        height=row_height,
        font=font,
        font_size=size,
        is_header=is_header,
    )


def layout_header(
    table: Table,
    font: str,
    size: float,
    measurer: TextMeasurer,
) -> LaidOutRow:
    """
    Lay out the header row from the column header texts.

    Args:
        table: Table whose column headers are laid out
        font: Header (bold) font
        size: Font size in points
        measurer: Text measurer

    Returns:
        LaidOutRow flagged as a header
    """
    return layout_row(table, table.headers, font, size, measurer, is_header=True)


def _cell_font(column: Column, row_font: str) -> str:
    """Column font has priority over the row font."""
    return column.font if column.font is not None else row_font


def _wrap_cell(
    table: Table,
    column: Column,
    text: Optional[str],
    row_font: str,
    size: float,
    measurer: TextMeasurer,
) -> List[str]:
    """Wrap a cell inside its own column."""
    content_width = column.content_width(table.cell_inside_padding)
    return wrap_text(text, content_width, _cell_font(column, row_font), size, measurer)


def _wrap_content_cell(
    table: Table,
    cells: Sequence[Optional[str]],
    index: int,
    row_font: str,
    size: float,
    measurer: TextMeasurer,
) -> List[str]:
    """Wrap a content cell, overlapping into the next column when allowed."""
    column = table.columns[index]

    if cells[index] is None:
        return [""]

    is_last_column = index == len(table.columns) - 1
    if not column.overlap_next_column or is_last_column:
        return _wrap_cell(table, column, cells[index], row_font, size, measurer)

    return _wrap_overlapping_cell(table, cells, index, row_font, size, measurer)


def _wrap_overlapping_cell(
    table: Table,
    cells: Sequence[Optional[str]],
    index: int,
    row_font: str,
    size: float,
    measurer: TextMeasurer,
) -> List[str]:
    """
    Wrap cell `index` using the free space of the next column.

    Only attempted when the next column is RIGHT and BOTTOM aligned and its
    own text fits on one line. The wrap width becomes this column's
    content width plus the full next column width. If the last wrapped
    line and the neighbour's text would collide, one empty line is added
    so the neighbour lands below it.
    """
    column = table.columns[index]
    next_column = table.columns[index + 1]
    text = cells[index]
    next_text = cells[index + 1]

    if (
        next_column.vertical_alignment is not VerticalAlignment.BOTTOM
        or next_column.alignment is not TextAlignment.RIGHT
    ):
        logger.debug(
            f"Column {index} overlap skipped: next column is "
            f"{next_column.alignment.name}/{next_column.vertical_alignment.name}, "
            f"needs RIGHT/BOTTOM"
        )
        return _wrap_cell(table, column, text, row_font, size, measurer)

    next_font = _cell_font(next_column, row_font)
    next_lines = _wrap_cell(table, next_column, next_text, row_font, size, measurer)
    if len(next_lines) > 1:
        logger.debug(
            f"Column {index} overlap skipped: next column needs {len(next_lines)} lines"
        )
        return _wrap_cell(table, column, text, row_font, size, measurer)

    font = _cell_font(column, row_font)
    overlap_width = column.content_width(table.cell_inside_padding) + next_column.width
    lines = wrap_text(text, overlap_width, font, size, measurer)

    last_line_width = measurer.width(lines[-1], font, size)
    next_text_width = measurer.width(next_text, next_font, size) if next_text is not None else 0.0
    if overlap_width < last_line_width + next_text_width:
        # Push the bottom-aligned neighbour below the last line
        lines.append("")

    return lines
