"""Navbar style generators."""

from sitesmith.models.content import NavLink
from sitesmith.models.style import SectionKind
from sitesmith.templates.base import SectionProps, StyleSpec, style_registrar
from sitesmith.templates.common import escape, is_visible, optional, sanitize_url, script_block, text_or

NAVBAR_STYLES: dict[str, StyleSpec] = {}
register = style_registrar(SectionKind.NAVBAR, NAVBAR_STYLES)

DEFAULT_NAV_LINKS: tuple[NavLink, ...] = (
    NavLink(label="About", href="#about"),
    NavLink(label="Services", href="#services"),
    NavLink(label="Featured", href="#featured"),
    NavLink(label="Contacts", href="#contact"),
)
DEFAULT_CENTERED_CTA_LABEL = "Get in Touch"
DEFAULT_HEADLINE_CTA_LABEL = "Contact Me"
DEFAULT_CTA_LINK = "#contact"
DEFAULT_NAV_HEADLINE = "Timeless Designs Built To Be Desired"

_BASE_CSS = """<style>
.navbar-refit { position: sticky; top: 0; z-index: 50; width: 100%; }
.navbar-refit .nav-inner { max-width: 80rem; margin: 0 auto; display: flex; align-items: center; justify-content: space-between; padding: 1.25rem 1.5rem; }
.navbar-refit .brand { font-weight: 700; letter-spacing: -0.02em; text-decoration: none; color: inherit; }
.navbar-refit .nav-links { display: flex; gap: 2rem; list-style: none; margin: 0; padding: 0; }
.navbar-refit .nav-link { text-decoration: none; color: inherit; font-size: 0.875rem; text-transform: uppercase; letter-spacing: 0.08em; }
.navbar-refit .menu-toggle { display: none; background: none; border: 0; cursor: pointer; }
@media (max-width: 768px) {
    .navbar-refit .menu-toggle { display: block; }
    .navbar-refit .nav-links { display: none; flex-direction: column; gap: 1rem; }
    .navbar-refit .nav-links.open { display: flex; }
}
</style>"""

_OVERLAY_CSS = """<style>
.navbar-overlay { position: absolute; top: 0; left: 0; right: 0; background: transparent; color: #ffffff; }
.navbar-overlay .nav-link { opacity: 0.85; }
.navbar-overlay .nav-link:hover { opacity: 1; }
</style>"""

_CENTERED_CSS = """<style>
.navbar-centered { background: #ffffff; border-bottom: 1px solid #E3E6E3; }
.navbar-centered .nav-inner { display: grid; grid-template-columns: 1fr auto 1fr; }
.navbar-centered .brand { text-align: center; font-size: 1.5rem; }
.navbar-centered .nav-cta { justify-self: end; padding: 0.625rem 1.25rem; border-radius: 9999px; background: #1F2933; color: #ffffff; text-decoration: none; font-size: 0.875rem; }
</style>"""

_HEADLINE_CSS = """<style>
.navbar-headline { background: #F6F7F5; }
.navbar-headline .nav-headline { max-width: 80rem; margin: 0 auto; padding: 3rem 1.5rem 2rem; font-size: clamp(2rem, 5vw, 4rem); line-height: 1.05; }
.navbar-headline .nav-cta { padding: 0.75rem 1.5rem; background: #1F2933; color: #ffffff; text-decoration: none; text-transform: uppercase; font-size: 0.75rem; letter-spacing: 0.12em; }
</style>"""

_MENU_SCRIPT = """
(function () {
    var toggle = document.querySelector('.navbar-refit .menu-toggle');
    var links = document.querySelector('.navbar-refit .nav-links');
    if (!toggle || !links) return;
    toggle.addEventListener('click', function () {
        links.classList.toggle('open');
    });
})();
"""


def _links(props: SectionProps) -> list[NavLink]:
    """Get the configured links, or the defaults when unset.

    An explicit empty list renders no links.
    """
    if props.content.navbar_links is None:
        return list(DEFAULT_NAV_LINKS)
    return list(props.content.navbar_links)


def _links_html(links: list[NavLink]) -> str:
    items = "".join(
        f'<li><a href="{sanitize_url(link.href)}" class="nav-link font-manrope">{escape(link.label)}</a></li>'
        for link in links
    )
    return f'<ul class="nav-links">{items}</ul>'


def _menu(links: list[NavLink]) -> tuple[str, str]:
    """Get the mobile toggle button and its script.

    Both are omitted when there are no links to toggle.
    """
    if not links:
        return "", ""
    button = '<button type="button" class="menu-toggle" aria-label="Toggle menu">&#9776;</button>'
    return button, script_block(_MENU_SCRIPT)


def _cta(props: SectionProps, default_label: str) -> tuple[str, str]:
    cta = props.content.navbar_cta
    label = text_or(cta.label if cta else None, default_label)
    link = text_or(cta.link if cta else None, DEFAULT_CTA_LINK)
    return escape(label), sanitize_url(link)


@register("1", "Classic", uses={"links"})
def navbar_style_1(props: SectionProps) -> str:
    """Brand left, links right."""
    links = _links(props)
    toggle, script = _menu(links)
    return f'''
    <nav class="navbar-refit navbar-classic bg-white border-b border-[#E3E6E3]">
        {_BASE_CSS}
        <div class="nav-inner">
            <a href="#hero" class="brand font-dm-sans">{escape(props.content.business_name)}</a>
            {toggle}
            {_links_html(links)}
        </div>
        {script}
    </nav>'''


@register("2", "Overlay", uses={"links"})
def navbar_style_2(props: SectionProps) -> str:
    """Transparent bar laid over the hero."""
    links = _links(props)
    toggle, script = _menu(links)
    return f'''
    <nav class="navbar-refit navbar-overlay">
        {_BASE_CSS}
        {_OVERLAY_CSS}
        <div class="nav-inner">
            <a href="#hero" class="brand font-dm-sans">{escape(props.content.business_name.upper())}</a>
            {toggle}
            {_links_html(links)}
        </div>
        {script}
    </nav>'''


@register("3", "Centered", uses={"links", "cta"})
def navbar_style_3(props: SectionProps) -> str:
    """Links left, centered brand, call to action right."""
    links = _links(props)
    toggle, script = _menu(links)
    label, link = _cta(props, DEFAULT_CENTERED_CTA_LABEL)
    return f'''
    <nav class="navbar-refit navbar-centered">
        {_BASE_CSS}
        {_CENTERED_CSS}
        <div class="nav-inner">
            {_links_html(links)}
            <a href="#hero" class="brand font-dm-sans">{escape(props.content.business_name)}</a>
            <a href="{link}" class="nav-cta font-manrope">{label}</a>
            {toggle}
        </div>
        {script}
    </nav>'''


@register("4", "Headline", uses={"links", "cta", "headline"})
def navbar_style_4(props: SectionProps) -> str:
    """Bar with a large statement headline underneath."""
    links = _links(props)
    toggle, script = _menu(links)
    label, link = _cta(props, DEFAULT_HEADLINE_CTA_LABEL)
    headline = text_or(props.content.navbar_headline, DEFAULT_NAV_HEADLINE)
    headline_html = optional(
        is_visible(props.visibility, "navbar_headline"),
        f'<h2 class="nav-headline font-dm-sans">{escape(headline)}</h2>',
    )
    return f'''
    <nav class="navbar-refit navbar-headline">
        {_BASE_CSS}
        {_HEADLINE_CSS}
        <div class="nav-inner">
            <a href="#hero" class="brand font-dm-sans">{escape(props.content.business_name)}</a>
            {toggle}
            {_links_html(links)}
            {optional(bool(label), f'<a href="{link}" class="nav-cta font-manrope">{label}</a>')}
        </div>
        {headline_html}
        {script}
    </nav>'''
