"""Tests for the document composer."""

from bs4 import BeautifulSoup

from sitesmith.models.style import SectionKind, StyleSelection
from sitesmith.services.composer import DEFAULT_BASE_DOCUMENT, compose, section_photos
from sitesmith.templates.common import PENDING_IMAGE_URL


def _soup(html):
    return BeautifulSoup(html, "html.parser")


def _section_ids(soup):
    return [el.get("id") for el in soup.body.find_all(["nav", "section", "footer"]) if el.parent.name in ("body", "main")]


class TestCompose:
    """Tests for compose()."""

    def test_sections_in_fixed_order(self, sample_content):
        """Test all six sections render in order."""
        soup = _soup(compose(None, sample_content, year=2024))

        assert soup.body.find("nav", class_="navbar-refit") is not None
        assert _section_ids(soup) == [None, "hero", "about", "services", "featured", "contact"]

    def test_navbar_first_and_footer_after_main(self, sample_content):
        """Test placement of navbar, content and footer."""
        soup = _soup(compose(None, sample_content, year=2024))

        children = [el for el in soup.body.children if getattr(el, "name", None)]
        assert children[0].name == "nav"
        assert children[1].name == "main"
        assert children[2].name == "footer"
        assert [s["id"] for s in children[1].find_all("section", recursive=False)] == [
            "hero",
            "about",
            "services",
            "featured",
        ]

    def test_title(self, sample_content):
        """Test document title from identity fields."""
        soup = _soup(compose(None, sample_content, year=2024))

        assert soup.title.get_text() == "Acme Builders - Quality homes since 1990"

    def test_idempotent(self, full_content):
        """Test composing the same inputs twice yields identical output."""
        styles = StyleSelection(hero="3", color_scheme="blue", font_pairing="classic")

        first = compose(DEFAULT_BASE_DOCUMENT, full_content, styles, year=2024)
        second = compose(DEFAULT_BASE_DOCUMENT, full_content, styles, year=2024)

        assert first == second

    def test_recompose_replaces_previous_output(self, full_content):
        """Test composing over a composed document leaves no duplicates."""
        styles = StyleSelection(color_scheme="dark", font_pairing="bold")
        first = compose(None, full_content, styles, year=2024)

        second = compose(first, full_content, styles, year=2024)
        soup = _soup(second)

        assert second == first
        assert len(soup.find_all(class_="hero-refit-wrapper")) == 1
        assert len(soup.find_all(id="theme-colors")) == 1
        assert len(soup.find_all(id="theme-font-link")) == 1

    def test_repeated_recompose_is_stable(self, full_content):
        """Test whitespace does not build up across recompositions."""
        base = "<!DOCTYPE html>\n<html>\n<head><title>x</title></head>\n<body>\n<main></main>\n</body>\n</html>\n"
        outputs = [compose(base, full_content, year=2024)]
        for _ in range(4):
            outputs.append(compose(outputs[-1], full_content, year=2024))

        assert len(set(outputs)) == 1
        assert not outputs[0].startswith("<!DOCTYPE html>\n\n")

    def test_stale_sections_removed(self, sample_content):
        """Test previously generated markup in the base is discarded."""
        base = (
            "<html><head><title>Old</title><style id=\"theme-colors\">old</style></head>"
            "<body><section class=\"hero-refit-wrapper\">stale hero</section>"
            "<main><div class=\"about-refit-wrapper\">stale about</div></main>"
            "<div id=\"keep\">kept</div></body></html>"
        )

        soup = _soup(compose(base, sample_content, year=2024))

        assert "stale" not in soup.get_text()
        assert soup.find(id="keep") is not None
        assert "old" not in soup.find(id="theme-colors").get_text()

    def test_master_toggle_removes_section(self, sample_content):
        """Test a false master flag omits the whole section."""
        sample_content.visibility = {"about_section": False}

        soup = _soup(compose(None, sample_content, year=2024))

        assert soup.find(class_="about-refit-wrapper") is None
        assert soup.find(class_="services-refit-wrapper") is not None

    def test_element_toggle_keeps_section(self, sample_content):
        """Test an element flag only hides that element."""
        sample_content.visibility = {"hero_tagline": False}

        soup = _soup(compose(None, sample_content, year=2024))

        hero = soup.find(class_="hero-refit-wrapper")
        assert hero is not None
        assert hero.find(class_="tagline") is None

    def test_disabled_style_omits_section(self, sample_content):
        """Test a None style id disables a section."""
        styles = StyleSelection(navbar=None, featured=None)

        soup = _soup(compose(None, sample_content, styles, year=2024))

        assert soup.find("nav") is None
        assert soup.find(class_="featured-refit-wrapper") is None

    def test_unknown_style_falls_back(self, sample_content):
        """Test unknown style ids render style 1."""
        fallback = compose(None, sample_content, StyleSelection(hero="42"), year=2024)
        default = compose(None, sample_content, StyleSelection(), year=2024)

        assert fallback == default

    def test_theme_in_head(self, sample_content):
        """Test theme stylesheets go in the head."""
        styles = StyleSelection(color_scheme="purple", font_pairing="tech")

        soup = _soup(compose(None, sample_content, styles, year=2024))

        assert soup.head.find(id="theme-colors") is not None
        assert soup.head.find(id="theme-font-link") is not None
        assert "Orbitron" in soup.head.find(id="theme-fonts").get_text()

    def test_no_font_pairing_no_font_css(self, sample_content):
        """Test fonts are only injected when a pairing is chosen."""
        soup = _soup(compose(None, sample_content, year=2024))

        assert soup.find(id="theme-fonts") is None
        assert soup.find(id="theme-font-link") is None

    def test_pending_placeholder_for_unresolved(self, sample_content):
        """Test opaque references are shown as the placeholder."""
        sample_content.hero_images = ["storage:abc", "https://cdn.example.com/b.jpg"]

        soup = _soup(compose(None, sample_content, StyleSelection(hero="1"), year=2024))

        srcs = [img["src"] for img in soup.select(".hero-slide")]
        assert srcs == [PENDING_IMAGE_URL, "https://cdn.example.com/b.jpg"]

    def test_base_without_structure(self, sample_content):
        """Test a fragment base gets html, head and body."""
        soup = _soup(compose('<div id="app"></div>', sample_content, year=2024))

        assert soup.head is not None
        assert soup.body.find(id="app") is not None
        assert soup.body.find("main") is not None


class TestSectionPhotos:
    """Tests for per-section photo selection."""

    def test_section_field_overrides_pool(self, sample_content):
        """Test an explicit list replaces the pool."""
        sample_content.about_images = ["https://x/about.jpg"]

        assert section_photos(SectionKind.ABOUT, sample_content, ["https://x/pool.jpg"]) == [
            "https://x/about.jpg"
        ]

    def test_unset_field_uses_pool(self, sample_content):
        """Test the pool is used when the field is unset."""
        assert section_photos("hero", sample_content, ["https://x/pool.jpg"]) == ["https://x/pool.jpg"]

    def test_empty_field_shows_nothing(self, sample_content):
        """Test an explicit empty list is not replaced by the pool."""
        sample_content.featured_images = []

        assert section_photos(SectionKind.FEATURED, sample_content, ["https://x/pool.jpg"]) == []

    def test_services_single_image(self, sample_content):
        """Test services uses its single image."""
        sample_content.services_image = "https://x/svc.jpg"

        assert section_photos(SectionKind.SERVICES, sample_content, ["https://x/pool.jpg"]) == [
            "https://x/svc.jpg"
        ]

    def test_navbar_and_footer_have_no_photos(self, sample_content):
        """Test photo-less sections."""
        assert section_photos(SectionKind.NAVBAR, sample_content, ["https://x/pool.jpg"]) == []
        assert section_photos(SectionKind.FOOTER, sample_content, ["https://x/pool.jpg"]) == []
