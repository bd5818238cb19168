"""
Module: core.models.table

Purpose:
    Table model: ordered columns, a row-major cell matrix and table-wide
    drawing flags. Validates the matrix shape on construction so layout
    never sees a ragged row.

Key Classes:
    - Table: Immutable table definition
    - ShapeMismatchError: Row cell count differs from column count

Dependencies:
    - reportlab.lib.colors: Header background color

Used By:
    - layout.rows: Row layout
    - output.row_renderer: Grid and background flags
    - controller: PageableDocument.draw_table
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Optional, Sequence, Tuple

from reportlab.lib.colors import Color

from .column import Column

DEFAULT_HEADER_BACKGROUND_COLOR = Color(224 / 255, 224 / 255, 224 / 255)

Cell = Optional[str]
Row = Tuple[Cell, ...]


class ShapeMismatchError(ValueError):
    """A content row does not have exactly one cell per column."""

    def __init__(self, row_index: Optional[int], cell_count: int, column_count: int) -> None:
        self.row_index = row_index
        self.cell_count = cell_count
        self.column_count = column_count
        where = f"row {row_index}" if row_index is not None else "row"
        super().__init__(
            f"{where} has {cell_count} cells but the table has {column_count} columns"
        )


def _reject_string_row(cells, row_index: Optional[int]) -> None:
    if isinstance(cells, str):
        where = f"row {row_index}" if row_index is not None else "row"
        raise TypeError(f"{where} must be a sequence of cells, got a string: {cells!r}")


def _as_row(cells: Iterable[Cell], row_index: int) -> Row:
    _reject_string_row(cells, row_index)
    return tuple(cells)


def check_row_shape(cells: Sequence[Cell], column_count: int, row_index: Optional[int] = None) -> None:
    """
    Raise ShapeMismatchError unless the row has one cell per column.

    A string is rejected with TypeError rather than read as one cell per
    character.
    """
    _reject_string_row(cells, row_index)
    if len(cells) != column_count:
        raise ShapeMismatchError(row_index, len(cells), column_count)


@dataclass(frozen=True)
class Table:
    """
    Table content for a document (immutable).

    A None cell is a blank cell, rendered as one empty line. It still
    counts towards the row's cell count.

    Attributes:
        columns: Columns in draw order (left to right)
        rows: Row-major cell matrix
        draw_grid: Draw grid lines around cells
        draw_headers: Draw a header row from column headers
        cell_inside_padding: Padding applied inside every cell, all sides
        header_background_color: Fill color of the header row

    Example:
        >>> table = Table(
        ...     columns=(Column(100, "Name"), Column(25, "Qty")),
        ...     rows=(("Widget", "3"),),
        ... )
        >>> table.width
        125
    """

    columns: Tuple[Column, ...]
    rows: Tuple[Row, ...] = ()
    draw_grid: bool = False
    draw_headers: bool = False
    cell_inside_padding: float = 0.0
    header_background_color: Color = DEFAULT_HEADER_BACKGROUND_COLOR

    def __post_init__(self) -> None:
        """Normalize sequences to tuples and validate the matrix shape."""
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(_as_row(row, index) for index, row in enumerate(self.rows)))

        if not self.columns:
            raise ValueError("table must have at least one column")
        if self.cell_inside_padding < 0:
            raise ValueError(
                f"cell_inside_padding must be non-negative: {self.cell_inside_padding}"
            )
        for index, row in enumerate(self.rows):
            check_row_shape(row, len(self.columns), index)

    @classmethod
    def single_cell(cls, column: Column, text: Cell, **options) -> "Table":
        """Build a one-column, one-row table."""
        return cls(columns=(column,), rows=((text,),), **options)

    @classmethod
    def single_column(cls, column: Column, texts: Iterable[Cell], **options) -> "Table":
        """Build a one-column table with one row per text."""
        if isinstance(texts, str):
            raise TypeError(f"texts must be a sequence of cells, got a string: {texts!r}")
        return cls(columns=(column,), rows=tuple((text,) for text in texts), **options)

    @cached_property
    def width(self) -> float:
        """Total table width (sum of column widths)."""
        return sum(column.width for column in self.columns)

    @property
    def headers(self) -> Row:
        """Header texts in column order."""
        return tuple(column.header for column in self.columns)

    @property
    def row_count(self) -> int:
        """Number of content rows."""
        return len(self.rows)
