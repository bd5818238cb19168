"""
Module: output.renderer

Purpose:
    Write recorded pages to PDF using ReportLab.
    Each Page becomes one PDF page: content primitives first, then
    footer primitives. A page crop box becomes the PDF CropBox.

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - output.primitives: Page and primitives

Used By:
    - controller: PageableDocument.save / to_bytes
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Sequence, Union

from reportlab.pdfgen import canvas

from .primitives import DrawText, FillRect, Page, Primitive, StrokeLine

logger = logging.getLogger(__name__)


def render_to_pdf(
    pages: Sequence[Page],
    output: Union[Path, str, BinaryIO],
) -> None:
    """
    Render pages to a PDF file.

    Args:
        pages: Closed pages, in order
        output: Path to write, or a binary file object

    Raises:
        IOError: If the PDF cannot be written

    Example:
        >>> render_to_pdf(document.close(), Path("output/tables.pdf"))
    """
    if not pages:
        logger.warning("No pages to render, creating empty PDF")

    if isinstance(output, (str, Path)):
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        target = str(output)
    else:
        target = output

    options = {"pagesize": (pages[0].width, pages[0].height)} if pages else {}
    c = canvas.Canvas(target, **options)

    cropping = False
    for page in pages:
        c.setPageSize((page.width, page.height))
        if page.crop_box is not None:
            c.setCropBox(page.crop_box)
            cropping = True
        elif cropping:
            # crop boxes carry over to later pages until replaced
            c.setCropBox((0, 0, page.width, page.height))
        _render_page(c, page)
        c.showPage()

    c.save()

    if isinstance(output, Path):
        logger.info(f"Rendered {len(pages)} pages to {output}")
    else:
        logger.info(f"Rendered {len(pages)} pages to stream")


def _render_page(c: canvas.Canvas, page: Page) -> None:
    """Replay a page's content, then its footer."""
    for primitive in page.content:
        _draw_primitive(c, primitive)
    for primitive in page.footer:
        _draw_primitive(c, primitive)


def _draw_primitive(c: canvas.Canvas, primitive: Primitive) -> None:
    if isinstance(primitive, FillRect):
        c.saveState()
        c.setFillColor(primitive.color)
        c.rect(primitive.x, primitive.y, primitive.width, primitive.height, stroke=0, fill=1)
        c.restoreState()
    elif isinstance(primitive, StrokeLine):
        c.line(primitive.x1, primitive.y1, primitive.x2, primitive.y2)
    elif isinstance(primitive, DrawText):
        c.setFont(primitive.font, primitive.size)
        c.drawString(primitive.x, primitive.y, primitive.text)
    else:
        raise TypeError(f"unknown primitive: {primitive!r}")
