"""Featured work style generators."""

from sitesmith.models.content import Product
from sitesmith.models.style import SectionKind
from sitesmith.templates.base import SectionProps, StyleSpec, style_registrar
from sitesmith.templates.common import (
    escape,
    image_src,
    is_visible,
    limit,
    optional,
    script_block,
    text_or,
)

FEATURED_STYLES: dict[str, StyleSpec] = {}
register = style_registrar(SectionKind.FEATURED, FEATURED_STYLES)

DEFAULT_HEADLINE = "Featured Products"
DEFAULT_SUBHEADLINE = "Take a look at some of our recent work"
DEFAULT_PRODUCT_TITLE = "Project {number}"
DEFAULT_PRODUCT_DESCRIPTION = "A showcase of our quality work."
PLACEHOLDER_PRODUCT_LIMIT = 4
GALLERY_LIMIT = 12

_BASE_CSS = """<style>
.featured-refit-wrapper { width: 100%; padding: 6rem 1.5rem; }
.featured-refit { max-width: 80rem; margin: 0 auto; }
.featured-refit .headline { font-size: clamp(2rem, 4.5vw, 3.5rem); line-height: 1.1; margin: 0 0 0.75rem; }
.featured-refit .subheadline { font-size: 1.125rem; max-width: 36rem; }
.featured-refit .projects-container { margin-top: 3rem; }
.featured-refit .product-image img { width: 100%; height: 100%; object-fit: cover; display: block; }
.featured-refit .product-title { font-size: 1.5rem; margin: 0 0 0.5rem; }
.featured-refit .product-tags { display: flex; flex-wrap: wrap; gap: 0.5rem; list-style: none; margin: 1rem 0 0; padding: 0; }
.featured-refit .product-tag { padding: 0.25rem 0.75rem; border-radius: 9999px; font-size: 0.75rem; }
.featured-refit .testimonial { margin-top: 1.5rem; padding-top: 1.5rem; border-top: 1px solid; }
.featured-refit .testimonial-quote { font-style: italic; }
.featured-refit .testimonial-quote::before { content: '\\201C'; font-size: 2rem; line-height: 0; margin-right: 0.25rem; }
.featured-refit .testimonial-author { font-weight: 600; font-size: 0.875rem; }
</style>"""

_SHOWCASE_CSS = """<style>
.featured-showcase .projects-container { display: flex; flex-direction: column; gap: 2rem; }
.featured-showcase .product-card { display: grid; grid-template-columns: 1fr 1fr; border-radius: 1.5rem; overflow: hidden; opacity: 0; transform: translateY(24px); transition: opacity 0.7s ease, transform 0.7s ease; }
.featured-showcase .product-card.visible { opacity: 1; transform: none; }
.featured-showcase .product-card:nth-child(even) .product-image { order: 2; }
.featured-showcase .product-image { min-height: 22rem; }
.featured-showcase .product-body { padding: 3rem; display: flex; flex-direction: column; justify-content: center; }
@media (max-width: 768px) { .featured-showcase .product-card { grid-template-columns: 1fr; } }
</style>"""

_REVEAL_SCRIPT = """
(function () {
    var cards = document.querySelectorAll('.featured-showcase .product-card');
    if (!cards.length) return;
    if (!('IntersectionObserver' in window)) {
        cards.forEach(function (el) { el.classList.add('visible'); });
        return;
    }
    var observer = new IntersectionObserver(function (entries) {
        entries.forEach(function (entry) {
            if (entry.isIntersecting) {
                entry.target.classList.add('visible');
                observer.unobserve(entry.target);
            }
        });
    }, { threshold: 0.15 });
    cards.forEach(function (el) { observer.observe(el); });
})();
"""

_GRID_CSS = """<style>
.featured-grid .projects-container { display: grid; grid-template-columns: repeat(auto-fill, minmax(18rem, 1fr)); gap: 2rem; }
.featured-grid .product-card { border-radius: 1rem; overflow: hidden; }
.featured-grid .product-image { aspect-ratio: 4 / 3; overflow: hidden; }
.featured-grid .product-body { padding: 1.5rem; }
</style>"""

_GALLERY_CSS = """<style>
.featured-gallery .projects-container { columns: 3 16rem; column-gap: 1rem; }
.featured-gallery .gallery-item { break-inside: avoid; margin-bottom: 1rem; border-radius: 0.75rem; overflow: hidden; cursor: zoom-in; }
.featured-gallery .gallery-item img { width: 100%; display: block; }
.featured-gallery .lightbox { position: fixed; inset: 0; display: none; align-items: center; justify-content: center; background: rgba(0, 0, 0, 0.9); z-index: 100; }
.featured-gallery .lightbox.open { display: flex; }
.featured-gallery .lightbox img { max-width: 90vw; max-height: 90vh; }
</style>"""

_LIGHTBOX_SCRIPT = """
(function () {
    var box = document.querySelector('.featured-gallery .lightbox');
    var items = document.querySelectorAll('.featured-gallery .gallery-item img');
    if (!box || !items.length) return;
    var target = box.querySelector('img');
    items.forEach(function (img) {
        img.addEventListener('click', function () {
            target.src = img.src;
            box.classList.add('open');
        });
    });
    box.addEventListener('click', function () { box.classList.remove('open'); });
})();
"""

_SPOTLIGHT_CSS = """<style>
.featured-spotlight .projects-container { display: grid; grid-template-columns: repeat(2, 1fr); gap: 2rem; }
.featured-spotlight .product-card { padding: 2.5rem; border-radius: 1.5rem; display: flex; flex-direction: column; gap: 1.5rem; }
.featured-spotlight .product-image { height: 16rem; border-radius: 1rem; overflow: hidden; }
.featured-spotlight .testimonial-quote { font-size: 1.25rem; }
@media (max-width: 768px) { .featured-spotlight .projects-container { grid-template-columns: 1fr; } }
</style>"""


def _products(props: SectionProps) -> list[Product]:
    """Get the products to show.

    When unset, placeholder projects are built from the photos.
    """
    if not is_visible(props.visibility, "featured_products"):
        return []
    if props.content.featured_products is not None:
        return list(props.content.featured_products)
    return [
        Product(
            title=DEFAULT_PRODUCT_TITLE.format(number=i + 1),
            description=DEFAULT_PRODUCT_DESCRIPTION,
            image=photo,
        )
        for i, photo in enumerate(limit(props.photos, PLACEHOLDER_PRODUCT_LIMIT))
    ]


def _product_image(props: SectionProps, product: Product, index: int) -> str:
    """Use the product's own image, falling back to the section photos."""
    src = product.image
    if not src and props.photos:
        src = props.photos[index % len(props.photos)]
    if not src:
        return ""
    return (
        f'<div class="product-image"><img src="{image_src(src)}" '
        f'alt="{escape(product.title)}"></div>'
    )


def _product_body(product: Product) -> str:
    tags = ""
    if product.tags:
        tags = '<ul class="product-tags">' + "".join(
            f'<li class="product-tag font-manrope">{escape(tag)}</li>' for tag in product.tags
        ) + "</ul>"
    testimonial = ""
    if product.testimonial:
        testimonial = (
            '<div class="testimonial">'
            f'<p class="testimonial-quote font-manrope">{escape(product.testimonial.quote)}</p>'
            f'<p class="testimonial-author font-manrope">{escape(product.testimonial.author)}</p>'
            "</div>"
        )
    return (
        '<div class="product-body">'
        f'<h3 class="product-title font-dm-sans">{escape(product.title)}</h3>'
        f'<p class="product-description font-manrope">{escape(product.description)}</p>'
        f"{tags}{testimonial}"
        "</div>"
    )


def _intro(props: SectionProps) -> str:
    headline = text_or(props.content.featured_headline, DEFAULT_HEADLINE)
    subheadline = text_or(props.content.featured_subheadline, DEFAULT_SUBHEADLINE)
    headline_html = optional(
        is_visible(props.visibility, "featured_headline"),
        f'<h2 class="headline font-dm-sans">{escape(headline)}</h2>',
    )
    subheadline_html = optional(
        is_visible(props.visibility, "featured_subheadline"),
        f'<p class="subheadline font-manrope">{escape(subheadline)}</p>',
    )
    return f'<div class="featured-intro">{headline_html}{subheadline_html}</div>'


def _cards(props: SectionProps, products: list[Product]) -> str:
    return "".join(
        f'<article class="product-card">{_product_image(props, product, i)}{_product_body(product)}</article>'
        for i, product in enumerate(products)
    )


@register("1", "Showcase", uses={"headline", "subheadline", "products", "testimonials", "tags", "images"})
def featured_style_1(props: SectionProps) -> str:
    """Large alternating cards that fade in on scroll."""
    products = _products(props)
    container = optional(
        bool(products),
        f'<div class="projects-container">{_cards(props, products)}</div>',
    )
    return f'''
    <section class="featured-refit-wrapper featured-showcase" id="featured">
        {_BASE_CSS}
        {_SHOWCASE_CSS}
        <div class="featured-refit">
            {_intro(props)}
            {container}
        </div>
        {optional(bool(products), script_block(_REVEAL_SCRIPT))}
    </section>'''


@register("2", "Grid", uses={"headline", "subheadline", "products", "testimonials", "tags", "images"})
def featured_style_2(props: SectionProps) -> str:
    """Even grid of product cards."""
    products = _products(props)
    container = optional(
        bool(products),
        f'<div class="projects-container">{_cards(props, products)}</div>',
    )
    return f'''
    <section class="featured-refit-wrapper featured-grid" id="featured">
        {_BASE_CSS}
        {_GRID_CSS}
        <div class="featured-refit">
            {_intro(props)}
            {container}
        </div>
    </section>'''


@register("3", "Gallery", uses={"headline", "subheadline", "images"})
def featured_style_3(props: SectionProps) -> str:
    """Masonry gallery of the featured images with a click-to-zoom lightbox."""
    photos = []
    if is_visible(props.visibility, "featured_products"):
        photos = limit(props.photos, GALLERY_LIMIT)
    items = "".join(
        f'<figure class="gallery-item"><img src="{image_src(photo)}" '
        f'alt="{escape(props.content.business_name)}"></figure>'
        for photo in photos
    )
    container = optional(bool(photos), f'<div class="projects-container">{items}</div>')
    lightbox = optional(bool(photos), '<div class="lightbox"><img alt=""></div>')
    return f'''
    <section class="featured-refit-wrapper featured-gallery" id="featured">
        {_BASE_CSS}
        {_GALLERY_CSS}
        <div class="featured-refit">
            {_intro(props)}
            {container}
            {lightbox}
        </div>
        {optional(bool(photos), script_block(_LIGHTBOX_SCRIPT))}
    </section>'''


@register("4", "Spotlight", uses={"headline", "subheadline", "products", "testimonials", "tags", "images"})
def featured_style_4(props: SectionProps) -> str:
    """Two-up cards that put client testimonials first."""
    products = _products(props)
    container = optional(
        bool(products),
        f'<div class="projects-container">{_cards(props, products)}</div>',
    )
    return f'''
    <section class="featured-refit-wrapper featured-spotlight" id="featured">
        {_BASE_CSS}
        {_SPOTLIGHT_CSS}
        <div class="featured-refit">
            {_intro(props)}
            {container}
        </div>
    </section>'''
