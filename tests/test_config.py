"""
Unit tests for DocumentConfig.
"""

import pytest
from reportlab.lib.pagesizes import A4

from pdftable_toolkit import DocumentConfig


class TestDocumentConfig:
    """Tests for DocumentConfig defaults, validation and derived values."""

    def test_default_when_created_then_a4_without_paddings(self):
        config = DocumentConfig()

        assert config.page_size == A4
        assert config.content_top == A4[1]
        assert config.available_width == A4[0]
        assert config.footer_lines == ()
        assert config.include_page_number is False

    def test_derived_when_paddings_set_then_content_area_shrinks(self):
        config = DocumentConfig(
            page_width=600,
            page_height=800,
            content_top_padding=10,
            content_right_padding=30,
            content_bottom_padding=40,
            content_left_padding=20,
        )

        assert config.content_top == 790
        assert config.available_width == 550
        assert config.available_height == 750

    def test_footer_lines_when_list_then_stored_as_tuple(self):
        config = DocumentConfig(footer_lines=["Example document"])

        assert config.footer_lines == ("Example document",)

    def test_config_when_assigned_then_frozen(self):
        config = DocumentConfig()

        with pytest.raises(AttributeError):
            config.font_size = 12

    @pytest.mark.parametrize("field,value", [
        ("page_width", 0),
        ("page_height", -1),
        ("content_top_padding", -1),
        ("footer_bottom_padding", -0.5),
        ("font_size", 0),
        ("heading_font_size", -2),
    ])
    def test_config_when_invalid_value_then_raises(self, field, value):
        with pytest.raises(ValueError, match=field):
            DocumentConfig(**{field: value})

    def test_config_when_paddings_exceed_height_then_raises(self):
        with pytest.raises(ValueError, match="Paddings exceed page height"):
            DocumentConfig(page_height=100, content_top_padding=60, content_bottom_padding=40)

    def test_config_when_paddings_exceed_width_then_raises(self):
        with pytest.raises(ValueError, match="Paddings exceed page width"):
            DocumentConfig(page_width=100, content_left_padding=50, content_right_padding=60)
