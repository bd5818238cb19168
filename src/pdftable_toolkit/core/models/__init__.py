"""
Module: core.models

Purpose:
    Data models for table definitions.

Key Classes:
    - Column: Column width, alignment and styling
    - Table: Columns plus cell matrix and drawing flags
    - TextAlignment / VerticalAlignment: Closed alignment enums
    - ShapeMismatchError: Ragged row detected

Used By:
    - pdftable_toolkit.layout
    - pdftable_toolkit.output
    - pdftable_toolkit.controller
"""

from .alignment import (
    TextAlignment,
    VerticalAlignment,
    horizontal_offset,
    vertical_offset,
)
from .column import Column
from .table import DEFAULT_HEADER_BACKGROUND_COLOR, ShapeMismatchError, Table, check_row_shape

__all__ = [
    # Alignment
    "TextAlignment",
    "VerticalAlignment",
    "horizontal_offset",
    "vertical_offset",
    # Models
    "Column",
    "Table",
    "DEFAULT_HEADER_BACKGROUND_COLOR",
    # Validation
    "ShapeMismatchError",
    "check_row_shape",
]
