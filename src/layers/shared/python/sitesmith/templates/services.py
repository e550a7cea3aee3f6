"""Services section style generators."""

from sitesmith.models.content import ServiceItem
from sitesmith.models.style import SectionKind
from sitesmith.templates.base import SectionProps, StyleSpec, style_registrar
from sitesmith.templates.common import (
    escape,
    image_src,
    is_visible,
    optional,
    script_block,
    text_or,
)

SERVICES_STYLES: dict[str, StyleSpec] = {}
register = style_registrar(SectionKind.SERVICES, SERVICES_STYLES)

DEFAULT_BADGE = "Services"
DEFAULT_HEADLINE = "What we do"
DEFAULT_SUBHEADLINE = "Find out which one of our services fit the needs of your project"
DEFAULT_SERVICES: tuple[ServiceItem, ...] = (
    ServiceItem(
        name="Kitchens",
        description=(
            "We design and build stunning kitchens tailored to your style and needs. "
            "Whether you're after a sleek modern space or a classic, timeless look, our "
            "expert team delivers high-quality craftsmanship, functionality, and attention "
            "to detail to create the heart of your home."
        ),
    ),
    ServiceItem(
        name="Loft Conversions",
        description=(
            "Transform your unused loft space into a beautiful, functional room. From home "
            "offices to extra bedrooms, we handle everything from design to completion with "
            "expert craftsmanship."
        ),
    ),
    ServiceItem(
        name="Bathrooms",
        description=(
            "Create your perfect bathroom sanctuary. We specialize in luxury bathroom "
            "renovations, from contemporary minimalist designs to traditional elegant spaces."
        ),
    ),
    ServiceItem(
        name="Extensions",
        description=(
            "Expand your living space with a professionally designed and built extension. "
            "We work with you to create seamless additions that enhance your home's value "
            "and functionality."
        ),
    ),
    ServiceItem(
        name="Restorations",
        description=(
            "Breathe new life into period properties with our expert restoration services. "
            "We preserve character while updating for modern living, respecting the original "
            "craftsmanship."
        ),
    ),
    ServiceItem(
        name="External Works",
        description=(
            "Complete your property with professional external works including driveways, "
            "patios, landscaping, and outdoor living spaces designed to complement your home."
        ),
    ),
)

SERVICE_ICONS: tuple[str, ...] = (
    '<path d="M3 9l9-7 9 7v11a2 2 0 01-2 2H5a2 2 0 01-2-2V9z"/><polyline points="9,22 9,12 15,12 15,22"/>',
    '<rect x="4" y="4" width="16" height="16" rx="2"/><path d="M9 4v16M15 4v16M4 9h16M4 15h16"/>',
    '<path d="M12 2.69l5.66 5.66a8 8 0 11-11.31 0z"/>',
    '<path d="M21 3h-6m6 0v6m0-6l-9 9M3 21h6m-6 0v-6m0 6l9-9"/>',
    '<path d="M23 4v6h-6M1 20v-6h6"/><path d="M3.51 9a9 9 0 0114.85-3.36L23 10M1 14l4.64 4.36A9 9 0 0020.49 15"/>',
    '<path d="M18 10h-1.26A8 8 0 109 20h9a5 5 0 000-10z"/>',
)

_BASE_CSS = """<style>
.services-refit-wrapper { width: 100%; padding: 6rem 1.5rem; }
.services-refit { max-width: 80rem; margin: 0 auto; }
.services-refit .services-badge { display: inline-block; padding: 0.375rem 0.875rem; border-radius: 9999px; font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.12em; }
.services-refit .headline { font-size: clamp(2rem, 4.5vw, 3.5rem); line-height: 1.1; margin: 1.25rem 0 0.75rem; }
.services-refit .subheadline { font-size: 1.125rem; max-width: 36rem; }
.services-refit .services-list { list-style: none; margin: 0; padding: 0; }
.services-refit .service-icon { width: 1.5rem; height: 1.5rem; flex: none; }
.services-refit .image-section img { width: 100%; height: 100%; object-fit: cover; display: block; }
</style>"""

_ACCORDION_CSS = """<style>
.services-accordion .services-body { display: grid; grid-template-columns: 1fr 1.2fr; gap: 4rem; margin-top: 3rem; }
.services-accordion .image-section { aspect-ratio: 4 / 5; overflow: hidden; border-radius: 1rem; }
.services-accordion .service-item { border-bottom: 1px solid; opacity: 0; transform: translateY(16px); transition: opacity 0.6s ease, transform 0.6s ease; }
.services-accordion .service-item.visible { opacity: 1; transform: none; }
.services-accordion .service-header { display: flex; align-items: center; gap: 1rem; width: 100%; padding: 1.5rem 0; background: none; border: 0; cursor: pointer; text-align: left; }
.services-accordion .service-name { flex: 1; font-size: 1.25rem; font-weight: 600; }
.services-accordion .service-toggle { transition: transform 0.3s ease; }
.services-accordion .service-item.open .service-toggle { transform: rotate(45deg); }
.services-accordion .service-description { max-height: 0; overflow: hidden; transition: max-height 0.4s ease; }
.services-accordion .service-item.open .service-description { max-height: 20rem; padding-bottom: 1.5rem; }
@media (max-width: 768px) { .services-accordion .services-body { grid-template-columns: 1fr; } }
</style>"""

_ACCORDION_SCRIPT = """
(function () {
    var items = document.querySelectorAll('.services-accordion .service-item');
    if (!items.length) return;
    items.forEach(function (item) {
        var header = item.querySelector('.service-header');
        header.addEventListener('click', function () {
            var wasOpen = item.classList.contains('open');
            items.forEach(function (other) { other.classList.remove('open'); });
            if (!wasOpen) item.classList.add('open');
        });
    });
    if (!('IntersectionObserver' in window)) {
        items.forEach(function (el) { el.classList.add('visible'); });
        return;
    }
    var observer = new IntersectionObserver(function (entries) {
        entries.forEach(function (entry) {
            if (entry.isIntersecting) {
                entry.target.classList.add('visible');
                observer.unobserve(entry.target);
            }
        });
    }, { threshold: 0.1 });
    items.forEach(function (el) { observer.observe(el); });
})();
"""

_CARDS_CSS = """<style>
.services-cards .services-header { display: flex; justify-content: space-between; align-items: end; gap: 2rem; flex-wrap: wrap; }
.services-cards .image-section { margin-top: 3rem; height: 22rem; overflow: hidden; border-radius: 1.5rem; }
.services-cards .services-list { display: grid; grid-template-columns: repeat(auto-fill, minmax(16rem, 1fr)); gap: 1.5rem; margin-top: 3rem; }
.services-cards .service-item { padding: 2rem; border: 1px solid; border-radius: 1rem; }
.services-cards .service-name { font-size: 1.125rem; font-weight: 600; margin: 1rem 0 0.5rem; }
</style>"""

_NUMBERED_CSS = """<style>
.services-numbered .services-refit { display: grid; grid-template-columns: 1fr 2fr; gap: 4rem; }
.services-numbered .services-intro { position: sticky; top: 6rem; align-self: start; }
.services-numbered .image-section { margin-top: 2rem; aspect-ratio: 1; overflow: hidden; }
.services-numbered .service-item { display: grid; grid-template-columns: 4rem 1fr; gap: 1rem; padding: 2rem 0; border-top: 1px solid; }
.services-numbered .service-number { font-size: 0.875rem; opacity: 0.6; }
.services-numbered .service-name { font-size: 1.5rem; margin: 0 0 0.5rem; }
@media (max-width: 768px) { .services-numbered .services-refit { grid-template-columns: 1fr; } }
</style>"""


def _services(props: SectionProps) -> list[ServiceItem]:
    """Get the services to list.

    Unset means the defaults; an explicit empty list stays empty.
    """
    if not is_visible(props.visibility, "services_list"):
        return []
    if props.content.services is None:
        return list(DEFAULT_SERVICES)
    return list(props.content.services)


def _icon(index: int) -> str:
    paths = SERVICE_ICONS[index % len(SERVICE_ICONS)]
    return (
        '<svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="1.5" '
        f'class="service-icon">{paths}</svg>'
    )


def _intro(props: SectionProps, badge_slot: bool = True) -> str:
    content = props.content
    headline = text_or(content.services_headline, DEFAULT_HEADLINE)
    subheadline = text_or(content.services_subheadline, DEFAULT_SUBHEADLINE)
    badge = text_or(content.services_badge, DEFAULT_BADGE)
    return "\n".join(
        part
        for part in (
            optional(
                badge_slot and is_visible(props.visibility, "services_badge"),
                f'<span class="services-badge font-manrope">{escape(badge)}</span>',
            ),
            optional(
                is_visible(props.visibility, "services_headline"),
                f'<h2 class="headline font-dm-sans">{escape(headline)}</h2>',
            ),
            optional(
                is_visible(props.visibility, "services_subheadline"),
                f'<p class="subheadline font-manrope">{escape(subheadline)}</p>',
            ),
        )
        if part
    )


def _image(props: SectionProps) -> str:
    if not props.photos or not is_visible(props.visibility, "services_image"):
        return ""
    return (
        f'<div class="image-section"><img src="{image_src(props.photos[0])}" '
        f'alt="{escape(props.content.business_name)}"></div>'
    )


@register("1", "Accordion", uses={"badge", "headline", "subheadline", "image", "services"})
def services_style_1(props: SectionProps) -> str:
    """Photo beside an expandable accordion of services."""
    services = _services(props)
    items = "".join(
        f'''
            <li class="service-item">
                <button type="button" class="service-header">
                    {_icon(i)}
                    <span class="service-name font-dm-sans">{escape(service.name)}</span>
                    <span class="service-toggle">+</span>
                </button>
                <p class="service-description font-manrope">{escape(service.description)}</p>
            </li>'''
        for i, service in enumerate(services)
    )
    service_list = optional(bool(services), f'<ul class="services-list">{items}</ul>')
    return f'''
    <section class="services-refit-wrapper services-accordion" id="services">
        {_BASE_CSS}
        {_ACCORDION_CSS}
        <div class="services-refit">
            {_intro(props)}
            <div class="services-body">
                {_image(props)}
                {service_list}
            </div>
        </div>
        {optional(bool(services), script_block(_ACCORDION_SCRIPT))}
    </section>'''


@register("2", "Cards", uses={"badge", "headline", "subheadline", "image", "services"})
def services_style_2(props: SectionProps) -> str:
    """Grid of bordered service cards under a wide banner photo."""
    services = _services(props)
    items = "".join(
        f'''
            <li class="service-item">
                {_icon(i)}
                <h3 class="service-name font-dm-sans">{escape(service.name)}</h3>
                <p class="service-description font-manrope">{escape(service.description)}</p>
            </li>'''
        for i, service in enumerate(services)
    )
    return f'''
    <section class="services-refit-wrapper services-cards" id="services">
        {_BASE_CSS}
        {_CARDS_CSS}
        <div class="services-refit">
            <div class="services-header">
                {_intro(props)}
            </div>
            {_image(props)}
            {optional(bool(services), f'<ul class="services-list">{items}</ul>')}
        </div>
    </section>'''


@register("3", "Numbered", uses={"headline", "subheadline", "image", "services"})
def services_style_3(props: SectionProps) -> str:
    """Sticky intro column beside a numbered list."""
    services = _services(props)
    items = "".join(
        f'''
            <li class="service-item">
                <span class="service-number font-manrope">{i + 1:02d}</span>
                <div>
                    <h3 class="service-name font-dm-sans">{escape(service.name)}</h3>
                    <p class="service-description font-manrope">{escape(service.description)}</p>
                </div>
            </li>'''
        for i, service in enumerate(services)
    )
    return f'''
    <section class="services-refit-wrapper services-numbered" id="services">
        {_BASE_CSS}
        {_NUMBERED_CSS}
        <div class="services-refit">
            <div class="services-intro">
                {_intro(props, badge_slot=False)}
                {_image(props)}
            </div>
            {optional(bool(services), f'<ul class="services-list">{items}</ul>')}
        </div>
    </section>'''
