"""
Module: layout.wrapper

Purpose:
    Greedy word wrapping of one cell's text into lines no wider than a
    content width.

Key Functions:
    - wrap_text(): Split text into lines

Algorithm:
    1. None -> one empty line
    2. Text that already fits -> returned unsplit (spaces kept)
    3. Otherwise split on single spaces and pack words greedily
    4. A word wider than the limit sits alone on its own line

Dependencies:
    - layout.measure: TextMeasurer

Used By:
    - layout.rows: Row layout and overlap heuristic
"""

from __future__ import annotations

from typing import List, Optional

from .measure import TextMeasurer

WORD_DELIMITER = " "


def wrap_text(
    text: Optional[str],
    max_width: float,
    font: str,
    size: float,
    measurer: TextMeasurer,
) -> List[str]:
    """
    Wrap text into lines bounded by max_width.

    Each call re-wraps from scratch; nothing is cached between calls.

    Args:
        text: Cell text (None renders as one empty line)
        max_width: Content width available for each line
        font: Font name used for measuring
        size: Font size in points
        measurer: Text measurer

    Returns:
        Lines in order, never empty

    Example:
        >>> wrap_text(None, 50, "Helvetica", 10, measurer)
        ['']
    """
    if text is None:
        return [""]

    if measurer.width(text, font, size) <= max_width:
        return [text]

    space_width = measurer.width(WORD_DELIMITER, font, size)
    lines: List[str] = []
    current_words: List[str] = []
    current_width = 0.0

    for word in text.split(WORD_DELIMITER):
        word_width = measurer.width(word, font, size)

        if not current_words:
            current_words.append(word)
            current_width = word_width
            continue

        if current_width + space_width + word_width <= max_width:
            current_words.append(word)
            current_width += space_width + word_width
            continue

        lines.append(WORD_DELIMITER.join(current_words).strip())
        current_words = [word]
        current_width = word_width

    if current_words:
        lines.append(WORD_DELIMITER.join(current_words).strip())

    return lines
