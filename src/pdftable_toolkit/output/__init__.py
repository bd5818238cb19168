"""
Module: output

Purpose:
    Drawing primitives, the page buffer canvas and PDF output.
    Converts recorded pages to PDF files using ReportLab.

Key Functions:
    - plan_row(): Row geometry as primitives
    - render_to_pdf(): Write pages to PDF

Key Classes:
    - Canvas / PageBuffer: Drawing interface and in-memory implementation
    - RowRenderer: Draws laid-out rows
    - Page, FillRect, StrokeLine, DrawText: Recorded output

Dependencies:
    - reportlab: PDF generation

Used By:
    - controller: PageableDocument
"""

from .primitives import DrawText, FillRect, Page, Primitive, StrokeLine
from .canvas import Canvas, PageBuffer, PageSequenceError
from .row_renderer import RowRenderer, plan_row
from .renderer import render_to_pdf

__all__ = [
    # Primitives
    "DrawText",
    "FillRect",
    "StrokeLine",
    "Primitive",
    "Page",
    # Canvas
    "Canvas",
    "PageBuffer",
    "PageSequenceError",
    # Rendering
    "RowRenderer",
    "plan_row",
    "render_to_pdf",
]
