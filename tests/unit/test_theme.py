"""Tests for the theme engine."""

import pytest

from sitesmith.services.theme import (
    COLOR_SCHEMES,
    FONT_PAIRINGS,
    generate_color_scheme_css,
    generate_font_css,
    generate_font_link,
    get_color_scheme,
    get_contrast_color,
    get_font_pairing,
    list_color_schemes,
    list_font_pairings,
)


class TestColorSchemes:
    """Tests for color scheme CSS."""

    def test_schemes_available(self):
        """Test the available palettes."""
        assert list_color_schemes() == ["default", "blue", "purple", "orange", "dark"]

    def test_unknown_scheme_falls_back(self):
        """Test unknown ids use the default palette."""
        assert get_color_scheme("neon") == COLOR_SCHEMES["default"]
        assert generate_color_scheme_css("neon") == generate_color_scheme_css("default")
        assert generate_color_scheme_css(None) == generate_color_scheme_css("default")

    def test_css_contains_variables(self):
        """Test root variables and identifying id."""
        css = generate_color_scheme_css("blue")

        assert css.startswith('<style id="theme-colors">')
        assert "--primary: #3B82F6;" in css
        assert "--secondary: #1E3A8A;" in css
        assert "--hero-bg: #1E3A8A;" in css
        assert ".hero-refit" in css

    def test_dark_scheme_styles_body(self):
        """Test dark palette swaps surfaces and sets body colors."""
        css = generate_color_scheme_css("dark")

        assert "body { background-color: var(--background)" in css
        assert "--hero-bg: #111827;" in css
        assert "body {" not in generate_color_scheme_css("default")


class TestContrastColor:
    """Tests for contrast color selection."""

    @pytest.mark.parametrize(
        "color,expected",
        [
            ("#ffffff", "#000000"),
            ("#000000", "#ffffff"),
            ("#fff", "#000000"),
            ("#1E3A8A", "#ffffff"),
            ("#FFF7ED", "#000000"),
        ],
    )
    def test_contrast(self, color, expected):
        """Test black or white pick."""
        assert get_contrast_color(color) == expected

    def test_invalid_color(self):
        """Test malformed colors raise."""
        with pytest.raises(ValueError):
            get_contrast_color("#12345")


class TestFontPairings:
    """Tests for font pairing CSS."""

    def test_pairings_available(self):
        """Test ten pairings are available."""
        assert len(list_font_pairings()) == 10
        assert FONT_PAIRINGS["classic"].heading == "Playfair Display"

    def test_unknown_pairing_falls_back(self):
        """Test unknown ids use the modern pairing."""
        assert get_font_pairing("comic") == FONT_PAIRINGS["modern"]

    def test_font_link(self):
        """Test the stylesheet link encodes family names."""
        link = generate_font_link("classic")

        assert 'id="theme-font-link"' in link
        assert "family=Playfair+Display:wght@300;400;500;600;700" in link
        assert "&amp;family=Source+Sans+Pro" in link

    def test_font_css(self):
        """Test heading and body fonts are applied."""
        css = generate_font_css("elegant")

        assert css.startswith('<style id="theme-fonts">')
        assert "h1, h2, h3, h4, h5, h6 { font-family: 'Cormorant Garamond', sans-serif !important; }" in css
        assert ".font-manrope { font-family: 'Montserrat', sans-serif !important; }" in css
        assert ".font-dm-sans { font-family: 'Cormorant Garamond', sans-serif !important; }" in css
