"""
Tests for the top-level package surface.
"""

import pdftable_toolkit


class TestPackage:
    def test_version_when_imported_then_non_empty_string(self):
        assert isinstance(pdftable_toolkit.__version__, str)
        assert pdftable_toolkit.__version__

    def test_all_when_listed_then_every_name_importable(self):
        for name in pdftable_toolkit.__all__:
            assert hasattr(pdftable_toolkit, name), name
