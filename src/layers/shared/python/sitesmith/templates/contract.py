"""Stable selectors shared by generators and the preview highlighter.

Internal markup of a variant may change freely as long as these selectors
keep matching.
"""

from sitesmith.models.style import SectionKind

WRAPPER_CLASSES: dict[SectionKind, str] = {
    SectionKind.NAVBAR: "navbar-refit",
    SectionKind.HERO: "hero-refit-wrapper",
    SectionKind.ABOUT: "about-refit-wrapper",
    SectionKind.SERVICES: "services-refit-wrapper",
    SectionKind.FEATURED: "featured-refit-wrapper",
    SectionKind.FOOTER: "footer-refit-wrapper",
}

# Editor field or visibility flag to the elements it controls.
FIELD_SELECTORS: dict[str, str] = {
    "navbar": ".navbar-refit",
    "navbar_links": ".navbar-refit .nav-links",
    "navbar_headline": ".navbar-refit .nav-headline",
    "navbar_cta": ".navbar-refit .nav-cta",
    "hero_section": ".hero-refit-wrapper",
    "hero_headline": ".hero-refit h1",
    "hero_tagline": ".hero-refit .tagline",
    "hero_description": ".hero-refit .description",
    "hero_badge_text": ".hero-refit .availability-badge",
    "hero_testimonial": ".hero-refit .testimonial-card",
    "hero_button": ".hero-refit .cta-button",
    "hero_image": ".hero-refit-wrapper .image-container",
    "about_section": ".about-refit-wrapper",
    "about_badge": ".about-refit .about-badge",
    "about_headline": ".about-refit .headline",
    "about_description": ".about-refit .description",
    "about_tags": ".about-refit .about-tags",
    "about_images": ".about-refit .image-gallery",
    "unique_selling_points": ".about-refit .usp-list",
    "services_section": ".services-refit-wrapper",
    "services_badge": ".services-refit .services-badge",
    "services_headline": ".services-refit .headline",
    "services_subheadline": ".services-refit .subheadline",
    "services_image": ".services-refit .image-section",
    "services_list": ".services-refit .services-list",
    "featured_section": ".featured-refit-wrapper",
    "featured_headline": ".featured-refit .headline",
    "featured_subheadline": ".featured-refit .subheadline",
    "featured_products": ".featured-refit .projects-container",
    "footer_section": ".footer-refit-wrapper",
    "footer_badge": ".footer-refit .footer-badge",
    "footer_headline": ".footer-refit .footer-headline",
    "footer_description": ".footer-refit .footer-description",
    "footer_contact": ".footer-refit .contact-info",
    "footer_social": ".footer-refit .social-section",
}

# Aliases for content fields that share an element with a visibility flag.
FIELD_ALIASES: dict[str, str] = {
    "business_name": "hero_headline",
    "tagline": "hero_tagline",
    "about": "hero_description",
    "hero_cta": "hero_button",
    "hero_images": "hero_image",
    "services": "services_list",
    "featured_images": "featured_products",
    "contact": "footer_contact",
    "footer": "footer_section",
}


def selector_for(field: str) -> str | None:
    """Get the highlight selector for an editor field, if any."""
    return FIELD_SELECTORS.get(FIELD_ALIASES.get(field, field))
