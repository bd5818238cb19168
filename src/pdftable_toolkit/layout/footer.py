"""
Module: layout.footer

Purpose:
    Footer placement: fixed footer lines plus an optional "N / total"
    page stamp, each centered horizontally near the page bottom.
    Composed once per page after pagination, when the total is known.

Key Functions:
    - compose_footer(): Positioned footer texts for one page
    - page_stamp(): "N / total" text

Dependencies:
    - layout.measure: TextMeasurer
    - output.primitives: DrawText
    - config: DocumentConfig

Used By:
    - controller: PageableDocument.close
"""

from __future__ import annotations

from typing import List, Sequence

from pdftable_toolkit.config import DocumentConfig
from pdftable_toolkit.output.primitives import DrawText

from .measure import TextMeasurer


def page_stamp(page_number: int, page_count: int) -> str:
    """Page numbering text, e.g. "1 / 2"."""
    return f"{page_number} / {page_count}"


def compose_footer(
    page_number: int,
    page_count: int,
    footer_lines: Sequence[str],
    include_page_number: bool,
    measurer: TextMeasurer,
    config: DocumentConfig,
) -> List[DrawText]:
    """
    Position footer lines and the page stamp for one page.

    The block is stacked from the top down: footer lines first, the page
    stamp last. The lowest baseline sits one line height above
    footer_bottom_padding.

    Args:
        page_number: 1-based page number
        page_count: Total pages in the document
        footer_lines: Footer text lines, top first
        include_page_number: Add the "N / total" stamp below the lines
        measurer: Text measurer
        config: Page width, footer font, size and bottom padding

    Returns:
        DrawText placements, top line first

    Example:
        >>> [t.text for t in compose_footer(1, 2, ["Example"], True, measurer, config)]
        ['Example', '1 / 2']
    """
    font = config.footer_font
    size = config.footer_font_size
    line_height = measurer.line_height(font, size)

    texts = list(footer_lines)
    if include_page_number:
        texts.append(page_stamp(page_number, page_count))

    line_y = line_height * len(texts) + config.footer_bottom_padding

    placed: List[DrawText] = []
    for text in texts:
        line_width = measurer.width(text, font, size)
        placed.append(DrawText(
            x=(config.page_width - line_width) / 2,
            y=line_y,
            text=text,
            font=font,
            size=size,
        ))
        line_y -= line_height

    return placed
