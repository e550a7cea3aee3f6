"""Theme engine: color schemes and font pairings as CSS.

Both mappings are table driven. Unknown ids fall back to the "default"
color scheme and the "modern" font pairing.
"""

from dataclasses import dataclass
from urllib.parse import quote_plus

DEFAULT_COLOR_SCHEME = "default"
DEFAULT_FONT_PAIRING = "modern"

COLOR_STYLE_ID = "theme-colors"
FONT_STYLE_ID = "theme-fonts"
FONT_LINK_ID = "theme-font-link"

# Utility classes generators use to tag heading and body text.
HEADING_FONT_CLASS = "font-dm-sans"
BODY_FONT_CLASS = "font-manrope"


@dataclass(frozen=True)
class ColorScheme:
    """A named palette."""

    primary: str
    secondary: str
    accent: str
    background: str
    light: str


@dataclass(frozen=True)
class FontPairing:
    """Heading and body font families."""

    heading: str
    body: str


COLOR_SCHEMES: dict[str, ColorScheme] = {
    "default": ColorScheme("#6B8F71", "#1F2933", "#4ECDC4", "#F6F7F5", "#FFFFFF"),
    "blue": ColorScheme("#3B82F6", "#1E3A8A", "#60A5FA", "#EFF6FF", "#FFFFFF"),
    "purple": ColorScheme("#8B5CF6", "#4C1D95", "#A78BFA", "#F5F3FF", "#FFFFFF"),
    "orange": ColorScheme("#F97316", "#7C2D12", "#FB923C", "#FFF7ED", "#FFFFFF"),
    "dark": ColorScheme("#D1D5DB", "#000000", "#374151", "#111827", "#1F2933"),
}

FONT_PAIRINGS: dict[str, FontPairing] = {
    "modern": FontPairing("Space Grotesk", "Inter"),
    "classic": FontPairing("Playfair Display", "Source Sans Pro"),
    "elegant": FontPairing("Cormorant Garamond", "Montserrat"),
    "bold": FontPairing("Bebas Neue", "Roboto"),
    "minimal": FontPairing("DM Sans", "DM Sans"),
    "professional": FontPairing("Poppins", "Open Sans"),
    "creative": FontPairing("Righteous", "Nunito"),
    "tech": FontPairing("Orbitron", "Exo 2"),
    "friendly": FontPairing("Quicksand", "Quicksand"),
    "luxury": FontPairing("Cinzel", "Lato"),
}

# Schemes whose page surfaces are dark; background and text roles swap.
DARK_SCHEMES = frozenset({"dark"})


def get_color_scheme(scheme_id: str | None) -> ColorScheme:
    """Get a palette by id, falling back to the default scheme."""
    return COLOR_SCHEMES.get(scheme_id or "", COLOR_SCHEMES[DEFAULT_COLOR_SCHEME])


def get_font_pairing(pairing_id: str | None) -> FontPairing:
    """Get a font pairing by id, falling back to "modern"."""
    return FONT_PAIRINGS.get(pairing_id or "", FONT_PAIRINGS[DEFAULT_FONT_PAIRING])


def list_color_schemes() -> list[str]:
    """List available color scheme ids."""
    return list(COLOR_SCHEMES)


def list_font_pairings() -> list[str]:
    """List available font pairing ids."""
    return list(FONT_PAIRINGS)


def get_contrast_color(hex_color: str) -> str:
    """Pick black or white text for a background color.

    Uses the YIQ brightness formula, biased toward black for mid tones.

    Args:
        hex_color: Color as #RGB or #RRGGBB.

    Returns:
        "#000000" or "#ffffff".
    """
    value = hex_color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {hex_color}")
    r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    yiq = (r * 299 + g * 587 + b * 114) / 1000
    return "#000000" if yiq >= 140 else "#ffffff"


def _section_variables(scheme: ColorScheme, dark: bool) -> dict[str, str]:
    """Derive per-section color roles from a palette."""
    muted_light = "rgba(255, 255, 255, 0.75)"
    hairline_light = "rgba(255, 255, 255, 0.1)"
    hairline_dark = "rgba(31, 41, 51, 0.1)"
    return {
        "--hero-bg": scheme.background if dark else scheme.secondary,
        "--hero-text": scheme.primary if dark else "#ffffff",
        "--hero-accent": scheme.primary,
        "--hero-button-text": get_contrast_color(scheme.primary if dark else "#ffffff"),
        "--about-bg": scheme.background,
        "--about-headline": "#ffffff" if dark else scheme.secondary,
        "--about-text": muted_light if dark else "rgba(31, 41, 51, 0.75)",
        "--about-badge-bg": hairline_light if dark else scheme.secondary,
        "--about-badge-text": "#ffffff",
        "--services-bg": scheme.background if dark else "#ffffff",
        "--services-headline": "#ffffff" if dark else scheme.secondary,
        "--services-text": muted_light if dark else "rgba(31, 41, 51, 0.65)",
        "--services-badge-bg": hairline_light if dark else scheme.secondary,
        "--services-badge-text": "#ffffff",
        "--services-icon": "#ffffff" if dark else scheme.secondary,
        "--services-border": hairline_light if dark else hairline_dark,
        "--services-accent": scheme.primary,
        "--featured-bg": scheme.background if dark else "#F6F7F5",
        "--featured-headline": "#ffffff" if dark else scheme.secondary,
        "--featured-text": muted_light if dark else "rgba(31, 41, 51, 0.65)",
        "--featured-card-bg": "#1a1a2e" if dark else "#ffffff",
        "--featured-card-alt-bg": "#0f0f1a" if dark else scheme.secondary,
        "--featured-tag-bg": hairline_light if dark else "rgba(31, 41, 51, 0.05)",
        "--featured-border": hairline_light if dark else hairline_dark,
        "--featured-accent": scheme.primary,
        "--footer-bg": "#0a0a0f" if dark else scheme.secondary,
        "--footer-text": "#ffffff",
        "--footer-text-muted": "rgba(255, 255, 255, 0.65)",
        "--footer-text-dim": "rgba(255, 255, 255, 0.5)",
        "--footer-border": hairline_light,
        "--footer-badge-bg": hairline_light,
        "--footer-social-bg": hairline_light,
        "--footer-social-hover": "rgba(255, 255, 255, 0.2)",
    }


# Selector to declarations, one block per generator element. Values refer
# to the derived variables so every palette styles the same markup.
_OVERRIDES: tuple[tuple[str, str], ...] = (
    (".navbar-refit", "color: var(--secondary)"),
    (".navbar-refit .nav-cta", "background: var(--secondary) !important; color: var(--light) !important"),
    (".hero-refit-wrapper", "background-color: var(--hero-bg) !important"),
    (".hero-refit h1", "color: var(--hero-text) !important"),
    (".hero-refit .tagline", "color: var(--hero-text) !important"),
    (".hero-refit .description", "color: var(--hero-text) !important; opacity: 0.8"),
    (".hero-refit .availability-badge", "color: var(--hero-text) !important"),
    (".hero-refit .availability-badge .dot", "background: var(--hero-accent) !important"),
    (".hero-refit .cta-button", "background: var(--hero-text) !important; color: var(--hero-bg) !important"),
    (".hero-refit .cta-button .arrow-icon", "background: var(--hero-bg) !important"),
    (".hero-refit .cta-button .arrow-icon svg", "stroke: var(--hero-text) !important"),
    (".hero-refit .testimonial-stars svg", "fill: var(--hero-accent) !important"),
    (".hero-refit .testimonial-card", "color: var(--hero-text) !important"),
    (".about-refit-wrapper", "background-color: var(--about-bg) !important"),
    (".about-refit .headline", "color: var(--about-headline) !important"),
    (".about-refit .description", "color: var(--about-text) !important"),
    (".about-refit .about-badge", "background-color: var(--about-badge-bg) !important; color: var(--about-badge-text) !important"),
    (".about-refit .about-tag", "color: var(--about-headline) !important"),
    (".services-refit-wrapper", "background-color: var(--services-bg) !important"),
    (".services-refit .headline", "color: var(--services-headline) !important"),
    (".services-refit .subheadline", "color: var(--services-text) !important"),
    (".services-refit .services-badge", "background-color: var(--services-badge-bg) !important; color: var(--services-badge-text) !important"),
    (".services-refit .service-name", "color: var(--services-headline) !important"),
    (".services-refit .service-description", "color: var(--services-text) !important"),
    (".services-refit .service-icon", "color: var(--services-icon) !important"),
    (".services-refit .service-toggle", "color: var(--services-icon) !important"),
    (".services-refit .service-item", "border-color: var(--services-border) !important"),
    (".services-refit .service-header:hover .service-name", "color: var(--services-accent) !important"),
    (".featured-refit-wrapper", "background-color: var(--featured-bg) !important"),
    (".featured-refit .headline", "color: var(--featured-headline) !important"),
    (".featured-refit .subheadline", "color: var(--featured-text) !important"),
    (".featured-refit .product-card:nth-child(odd)", "background-color: var(--featured-card-bg) !important"),
    (".featured-refit .product-card:nth-child(even)", "background-color: var(--featured-card-alt-bg) !important"),
    (".featured-refit .product-title", "color: var(--featured-headline) !important"),
    (".featured-refit .product-description", "color: var(--featured-text) !important"),
    (".featured-refit .product-tag", "background-color: var(--featured-tag-bg) !important; color: var(--featured-headline) !important"),
    (".featured-refit .testimonial", "border-top-color: var(--featured-border) !important"),
    (".featured-refit .testimonial-quote", "color: var(--featured-text) !important"),
    (".featured-refit .testimonial-quote::before", "color: var(--featured-accent) !important"),
    (".featured-refit .testimonial-author", "color: var(--featured-headline) !important"),
    (".featured-refit .product-card:nth-child(even) .product-title", "color: #ffffff !important"),
    (".featured-refit .product-card:nth-child(even) .product-description", "color: rgba(255, 255, 255, 0.75) !important"),
    (".featured-refit .product-card:nth-child(even) .product-tag", "background-color: rgba(255, 255, 255, 0.1) !important; color: #ffffff !important"),
    (".featured-refit .product-card:nth-child(even) .testimonial", "border-top-color: rgba(255, 255, 255, 0.1) !important"),
    (".featured-refit .product-card:nth-child(even) .testimonial-quote", "color: rgba(255, 255, 255, 0.75) !important"),
    (".featured-refit .product-card:nth-child(even) .testimonial-author", "color: #ffffff !important"),
    (".footer-refit-wrapper", "background-color: var(--footer-bg) !important"),
    (".footer-refit .footer-headline", "color: var(--footer-text) !important"),
    (".footer-refit .footer-description", "color: var(--footer-text-muted) !important"),
    (".footer-refit .footer-blurb", "color: var(--footer-text-muted) !important"),
    (".footer-refit .footer-nav a", "color: var(--footer-text-muted) !important"),
    (".footer-refit .footer-badge", "background-color: var(--footer-badge-bg) !important; color: var(--footer-text) !important"),
    (".footer-refit .contact-label", "color: var(--footer-text) !important"),
    (".footer-refit .contact-value", "color: var(--footer-text-muted) !important"),
    (".footer-refit .contact-value:hover", "color: var(--footer-text) !important"),
    (".footer-refit .social-section", "border-top-color: var(--footer-border) !important"),
    (".footer-refit .social-label", "color: var(--footer-text) !important"),
    (".footer-refit .social-link", "background-color: var(--footer-social-bg) !important; color: var(--footer-text) !important"),
    (".footer-refit .social-link:hover", "background-color: var(--footer-social-hover) !important"),
    (".footer-refit .copyright", "border-top-color: var(--footer-border) !important"),
    (".footer-refit .copyright-text", "color: var(--footer-text-dim) !important"),
    (".footer-refit .copyright-link", "color: var(--footer-text-dim) !important"),
    (".footer-refit .copyright-link:hover", "color: var(--footer-text) !important"),
)


def generate_color_scheme_css(scheme_id: str | None) -> str:
    """Render the color scheme stylesheet.

    Args:
        scheme_id: Color scheme id. Unknown ids use "default".

    Returns:
        A ``<style id="theme-colors">`` element as a string.
    """
    key = scheme_id if scheme_id in COLOR_SCHEMES else DEFAULT_COLOR_SCHEME
    scheme = COLOR_SCHEMES[key]
    variables = {
        "--primary": scheme.primary,
        "--secondary": scheme.secondary,
        "--accent": scheme.accent,
        "--background": scheme.background,
        "--light": scheme.light,
        **_section_variables(scheme, dark=key in DARK_SCHEMES),
    }
    root = "\n".join(f"    {name}: {value};" for name, value in variables.items())
    rules = "\n".join(f"{selector} {{ {declarations}; }}" for selector, declarations in _OVERRIDES)
    body_rule = ""
    if key in DARK_SCHEMES:
        body_rule = "\nbody { background-color: var(--background); color: var(--primary); }"
    return f'<style id="{COLOR_STYLE_ID}">\n:root {{\n{root}\n}}{body_rule}\n{rules}\n</style>'


def font_stylesheet_url(pairing: FontPairing) -> str:
    """Build the Google Fonts URL for a pairing."""
    heading = quote_plus(pairing.heading)
    body = quote_plus(pairing.body)
    return (
        "https://fonts.googleapis.com/css2"
        f"?family={heading}:wght@300;400;500;600;700"
        f"&family={body}:wght@300;400;500;600"
        "&display=swap"
    )


def generate_font_link(pairing_id: str | None) -> str:
    """Render the web font stylesheet link."""
    url = font_stylesheet_url(get_font_pairing(pairing_id))
    return f'<link id="{FONT_LINK_ID}" rel="stylesheet" href="{url.replace("&", "&amp;")}">'


def generate_font_css(pairing_id: str | None) -> str:
    """Render the global font override stylesheet.

    All text uses the body font, headings use the heading font, and the two
    generator utility classes are reinforced explicitly.
    """
    pairing = get_font_pairing(pairing_id)
    heading = f"'{pairing.heading}', sans-serif"
    body = f"'{pairing.body}', sans-serif"
    return (
        f'<style id="{FONT_STYLE_ID}">\n'
        f"* {{ font-family: {body} !important; }}\n"
        f"body, p, span, div, a, button, input, textarea, select, li {{ font-family: {body} !important; }}\n"
        f"h1, h2, h3, h4, h5, h6 {{ font-family: {heading} !important; }}\n"
        f".{HEADING_FONT_CLASS} {{ font-family: {heading} !important; }}\n"
        f".{BODY_FONT_CLASS} {{ font-family: {body} !important; }}\n"
        "</style>"
    )
