"""
Module: layout

Purpose:
    Text wrapping, row layout, pagination and footer placement.
    Converts table rows into laid-out rows and decides page breaks.

Key Functions:
    - wrap_text(): Greedy word wrap
    - layout_row() / layout_header(): Row layout with overlap heuristic
    - compose_footer(): Footer placements for one page

Key Classes:
    - TextMeasurer / ReportLabMeasurer: Text measurement
    - PageCursor: Page-advance protocol
    - WrappedCell, LaidOutRow, CursorState: Layout models

Dependencies:
    - reportlab: Font metrics
    - pdftable_toolkit.core.models: Table, Column

Used By:
    - controller: PageableDocument
"""

from .measure import ReportLabMeasurer, TextMeasurer
from .models import CursorState, LaidOutRow, WrappedCell
from .wrapper import wrap_text
from .rows import layout_header, layout_row
from .cursor import PageCursor
from .footer import compose_footer, page_stamp

__all__ = [
    # Measurement
    "TextMeasurer",
    "ReportLabMeasurer",
    # Models
    "WrappedCell",
    "LaidOutRow",
    "CursorState",
    # Functions
    "wrap_text",
    "layout_row",
    "layout_header",
    "compose_footer",
    "page_stamp",
    # Pagination
    "PageCursor",
]
