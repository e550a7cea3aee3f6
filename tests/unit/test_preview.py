"""Tests for preview synchronization."""

from unittest.mock import MagicMock

from sitesmith.models.style import StyleSelection
from sitesmith.services.preview import (
    HIGHLIGHT_CLASS,
    HIGHLIGHT_STYLE_ID,
    PreviewSurface,
    PreviewSync,
)

DOCUMENT = (
    "<html><head></head><body>"
    '<section class="hero-refit-wrapper"><div class="hero-refit">'
    "<h1>Acme</h1><p class=\"tagline\">Tag</p></div></section>"
    '<section class="about-refit-wrapper"><div class="about-refit">'
    '<h2 class="headline">About Acme</h2></div></section>'
    "</body></html>"
)


class TestPreviewSurface:
    """Tests for PreviewSurface."""

    def test_highlight(self):
        """Test matching elements are outlined and styles injected once."""
        surface = PreviewSurface()
        surface.load(DOCUMENT)

        assert surface.highlight(".hero-refit h1") == 1
        assert surface.highlight(".about-refit .headline") == 1

        html = surface.html()
        assert html.count(f'id="{HIGHLIGHT_STYLE_ID}"') == 1
        assert f'class="headline {HIGHLIGHT_CLASS}"' in html
        assert "<h1>Acme</h1>" in html

    def test_single_highlight_batch(self):
        """Test a new highlight clears the previous one."""
        surface = PreviewSurface()
        surface.load(DOCUMENT)

        surface.highlight(".hero-refit h1")
        surface.highlight(".hero-refit .tagline")

        assert surface.highlighted_count == 1
        assert 'class="tagline editor-highlight"' in surface.html()
        assert "<h1>Acme</h1>" in surface.html()

    def test_highlight_by_text(self):
        """Test optional text filter."""
        surface = PreviewSurface()
        surface.load(DOCUMENT)

        assert surface.highlight("h1, h2", text="About") == 1

    def test_no_match(self):
        """Test no matches highlights nothing."""
        surface = PreviewSurface()
        surface.load(DOCUMENT)

        assert surface.highlight(".missing") == 0
        assert HIGHLIGHT_STYLE_ID not in surface.html()

    def test_clear_highlight(self):
        """Test clearing removes the class and the highlight styles."""
        surface = PreviewSurface()
        surface.load(DOCUMENT)
        surface.highlight(".hero-refit h1")

        surface.clear_highlight()

        assert "<h1>Acme</h1>" in surface.html()
        assert HIGHLIGHT_STYLE_ID not in surface.html()
        assert HIGHLIGHT_CLASS not in surface.html()
        assert surface.highlighted_count == 0


class TestPreviewSync:
    """Tests for PreviewSync."""

    def test_refresh_reloads_only_on_change(self, sample_content):
        """Test identical compositions do not reload the surface."""
        surface = MagicMock(wraps=PreviewSurface())
        sync = PreviewSync(surface)

        assert sync.refresh(sample_content, StyleSelection(), year=2024) is True
        assert sync.refresh(sample_content, StyleSelection(), year=2024) is False

        sample_content.tagline = "Changed"
        assert sync.refresh(sample_content, StyleSelection(), year=2024) is True
        assert surface.load.call_count == 2

    def test_focus_uses_field_selectors(self, sample_content):
        """Test focusing a content field outlines its element."""
        surface = PreviewSurface()
        sync = PreviewSync(surface)
        sync.refresh(sample_content, year=2024)

        assert sync.focus("business_name") == 1
        assert sync.focus("unmapped_field") == 0
        assert surface.highlighted_count == 0

    def test_focus_survives_reload(self, sample_content):
        """Test the focused field is highlighted again after a reload."""
        surface = PreviewSurface()
        sync = PreviewSync(surface)
        sync.refresh(sample_content, year=2024)
        sync.focus("hero_tagline")

        sample_content.tagline = "Another tagline"
        sync.refresh(sample_content, year=2024)

        assert surface.highlighted_count == 1

    def test_blur(self, sample_content):
        """Test blur clears focus and highlights."""
        surface = PreviewSurface()
        sync = PreviewSync(surface)
        sync.refresh(sample_content, year=2024)
        sync.focus("services_list")

        sync.blur()

        assert sync.focused_field is None
        assert surface.highlighted_count == 0

    def test_custom_composer(self, sample_content):
        """Test the composer function is injectable."""
        composer = MagicMock(return_value=DOCUMENT)
        sync = PreviewSync(PreviewSurface(), composer_fn=composer, base_document="<html></html>")

        sync.refresh(sample_content)

        composer.assert_called_once_with("<html></html>", sample_content, None, None)
