import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import pdftable_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from pdftable_toolkit.layout.measure import TextMeasurer


class FixedWidthMeasurer(TextMeasurer):
    """
    Monospace measurer: every character is char_width wide, every font
    has the same line height. Keeps layout arithmetic exact in tests.
    """

    def __init__(self, char_width: float = 5.0, line_height: float = 10.0) -> None:
        self.char_width = char_width
        self._line_height = line_height

    def width(self, text: str, font: str, size: float) -> float:
        return len(text) * self.char_width

    def line_height(self, font: str, size: float) -> float:
        return self._line_height


# Common test fixtures
@pytest.fixture
def measurer():
    """Monospace measurer: 5pt per character, 10pt lines."""
    return FixedWidthMeasurer()


@pytest.fixture
def measurer_factory():
    """Factory for measurers with custom metrics."""
    def _create(char_width: float = 5.0, line_height: float = 10.0):
        return FixedWidthMeasurer(char_width=char_width, line_height=line_height)
    return _create
