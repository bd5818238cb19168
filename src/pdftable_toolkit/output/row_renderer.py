"""
Module: output.row_renderer

Purpose:
    Turn a laid-out row into drawing primitives at a cursor position and
    issue them to a canvas.

Key Functions:
    - plan_row(): Pure geometry, returns primitives in draw order

Key Classes:
    - RowRenderer: Plans and draws rows onto a Canvas

Algorithm:
    Draw order per row:
    1. Header rows: full-width header background
    2. Column backgrounds (override the header background)
    3. Grid lines, if the table draws a grid
    4. Cell lines, placed by column alignment
    Header rows use TOP/LEFT placement regardless of column alignment.

Dependencies:
    - core.models: Table, alignment offsets
    - layout.models: LaidOutRow, CursorState
    - layout.measure: TextMeasurer
    - output.canvas: Canvas

Used By:
    - controller: PageableDocument.draw_table
"""

from __future__ import annotations

from typing import List, Sequence

from pdftable_toolkit.core.models import (
    Column,
    Table,
    TextAlignment,
    VerticalAlignment,
    horizontal_offset,
    vertical_offset,
)
from pdftable_toolkit.layout.measure import TextMeasurer
from pdftable_toolkit.layout.models import CursorState, LaidOutRow

from .canvas import Canvas
from .primitives import DrawText, FillRect, Primitive, StrokeLine


def plan_row(
    row: LaidOutRow,
    table: Table,
    x: float,
    y: float,
    measurer: TextMeasurer,
) -> List[Primitive]:
    """
    Compute every primitive for one row.

    Args:
        row: Laid-out row
        table: Table (columns, padding, grid and header background)
        x: Left edge of the row
        y: Top edge of the row
        measurer: Text measurer for line widths

    Returns:
        Primitives in draw order
    """
    primitives: List[Primitive] = []

    if row.is_header:
        primitives.append(FillRect(
            x=x,
            y=y - row.height,
            width=table.width,
            height=row.height,
            color=table.header_background_color,
        ))

    primitives.extend(_column_backgrounds(table.columns, x, y, row.height))

    if table.draw_grid:
        primitives.extend(_row_grid(table.columns, x, y, row.height))

    cell_left = x
    for column, cell in zip(table.columns, row.cells):
        primitives.extend(_cell_lines(row, column, cell.lines, table.cell_inside_padding, cell_left, y, measurer))
        cell_left += column.width

    return primitives


def _column_backgrounds(
    columns: Sequence[Column],
    x: float,
    y: float,
    row_height: float,
) -> List[FillRect]:
    """Fill rectangles for columns that have a background color."""
    rects: List[FillRect] = []
    cell_left = x
    for column in columns:
        if column.background_color is not None:
            rects.append(FillRect(
                x=cell_left,
                y=y - row_height,
                width=column.width,
                height=row_height,
                color=column.background_color,
            ))
        cell_left += column.width
    return rects


def _row_grid(
    columns: Sequence[Column],
    x: float,
    y: float,
    row_height: float,
) -> List[StrokeLine]:
    """
    Grid segments for one row.

    A vertical separator is drawn left of a column when that column or the
    one before it shows the grid; top and bottom edges only for columns
    that show it.
    """
    bottom = y - row_height
    lines: List[StrokeLine] = []
    cell_left = x
    previous_draws_grid = False

    for column in columns:
        if column.draws_grid or previous_draws_grid:
            lines.append(StrokeLine(cell_left, y, cell_left, bottom))
        if column.draws_grid:
            lines.append(StrokeLine(cell_left, y, cell_left + column.width, y))
            lines.append(StrokeLine(cell_left, bottom, cell_left + column.width, bottom))
        cell_left += column.width
        previous_draws_grid = column.draws_grid

    if previous_draws_grid:
        # right edge of the last column
        lines.append(StrokeLine(cell_left, y, cell_left, bottom))

    return lines


def _cell_lines(
    row: LaidOutRow,
    column: Column,
    lines: Sequence[str],
    cell_padding: float,
    cell_left: float,
    cell_top: float,
    measurer: TextMeasurer,
) -> List[DrawText]:
    """Baseline positions for every line of one cell."""
    font = column.font if column.font is not None else row.font
    size = row.font_size

    if row.is_header:
        alignment = TextAlignment.LEFT
        vertical_alignment = VerticalAlignment.TOP
    else:
        alignment = column.alignment
        vertical_alignment = column.vertical_alignment

    line_top = cell_top - vertical_offset(
        vertical_alignment, row.height, row.line_height, len(lines), cell_padding,
    )

    texts: List[DrawText] = []
    for line in lines:
        baseline = line_top - row.line_height
        line_width = measurer.width(line, font, size)
        texts.append(DrawText(
            x=cell_left + horizontal_offset(alignment, column.width, line_width, cell_padding),
            y=baseline,
            text=line,
            font=font,
            size=size,
        ))
        line_top = baseline

    return texts


class RowRenderer:
    """
    Draws laid-out rows of one table onto a canvas.

    Example:
        >>> renderer = RowRenderer(table, measurer)
        >>> state = renderer.draw(canvas, row, state)
    """

    def __init__(self, table: Table, measurer: TextMeasurer) -> None:
        self._table = table
        self._measurer = measurer

    def plan(self, row: LaidOutRow, state: CursorState) -> List[Primitive]:
        """Primitives for a row whose top-left corner is at the cursor."""
        return plan_row(row, self._table, state.x, state.y, self._measurer)

    def draw(self, canvas: Canvas, row: LaidOutRow, state: CursorState) -> CursorState:
        """
        Draw a row at the cursor.

        Args:
            canvas: Target canvas (its open page receives the primitives)
            row: Laid-out row
            state: Cursor at the row's top-left corner

        Returns:
            Cursor at the next row's top-left corner
        """
        for primitive in self.plan(row, state):
            _emit(canvas, primitive)
        return state.moved_to(state.x, state.y - row.height)


def _emit(canvas: Canvas, primitive: Primitive) -> None:
    if isinstance(primitive, FillRect):
        canvas.fill_rect(primitive.x, primitive.y, primitive.width, primitive.height, primitive.color)
    elif isinstance(primitive, StrokeLine):
        canvas.stroke_line(primitive.x1, primitive.y1, primitive.x2, primitive.y2)
    elif isinstance(primitive, DrawText):
        canvas.draw_text(primitive.x, primitive.y, primitive.text, primitive.font, primitive.size)
    else:
        raise TypeError(f"unknown primitive: {primitive!r}")
