"""Top-level package for the PDF table toolkit.

Provides subpackages:
- pdftable_toolkit.core – table and column models
- pdftable_toolkit.layout – wrapping, row layout, pagination and footers
- pdftable_toolkit.output – drawing primitives, page buffer and PDF writer
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pdftable-toolkit")
except PackageNotFoundError:
    # source checkout on sys.path, not installed
    __version__ = "0.0.0"

from .config import DocumentConfig
from .controller import PageableDocument
from .core.models import (
    Column,
    ShapeMismatchError,
    Table,
    TextAlignment,
    VerticalAlignment,
)
from .output.canvas import PageSequenceError

__all__: list[str] = [
    "__version__",
    "Column",
    "DocumentConfig",
    "PageableDocument",
    "PageSequenceError",
    "ShapeMismatchError",
    "Table",
    "TextAlignment",
    "VerticalAlignment",
]
