"""About section style generators."""

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

ABOUT_STYLES: dict[str, StyleSpec] = {}
register = style_registrar(SectionKind.ABOUT, ABOUT_STYLES)

DEFAULT_BADGE = "About"
DEFAULT_HEADLINE_TEMPLATE = "About {business_name}"
MAX_IMAGES = 4
POINT_COUNT = 3
DEFAULT_FEATURE_POINTS = ("Premium", "Exclusive", "Dedicated Service")
DEFAULT_FEATURE_TEXT = "Defining excellence in our industry."
DEFAULT_MILESTONES = ("Establishment", "Growth", "Future")
MILESTONE_TEXT = (
    "Laying the foundation for excellence and establishing core values.",
    "Expanding our horizons and refining our craft to serve you better.",
    "Innovating for tomorrow while staying true to our roots.",
)

_BASE_CSS = """<style>
.about-refit-wrapper { width: 100%; padding: 6rem 1.5rem; }
.about-refit { max-width: 80rem; margin: 0 auto; }
.about-refit .about-badge { display: inline-block; padding: 0.375rem 0.875rem; border-radius: 9999px; font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.12em; }
.about-refit .headline { font-size: clamp(2rem, 4.5vw, 3.5rem); line-height: 1.1; margin: 1.25rem 0; }
.about-refit .description { font-size: 1.125rem; line-height: 1.7; }
.about-refit .about-tagline { font-style: italic; opacity: 0.7; }
.about-refit .about-tags { display: flex; flex-wrap: wrap; gap: 0.5rem; margin-top: 1.5rem; padding: 0; list-style: none; }
.about-refit .about-tag { padding: 0.25rem 0.75rem; border: 1px solid currentColor; border-radius: 9999px; font-size: 0.75rem; }
.about-refit .image-gallery img { width: 100%; height: 100%; object-fit: cover; display: block; }
</style>"""

_SPLIT_CSS = """<style>
.about-split .about-refit { display: grid; grid-template-columns: 1fr 1fr; gap: 4rem; align-items: start; }
.about-split .image-gallery { display: grid; grid-template-columns: 1fr 1fr; gap: 1rem; }
.about-split .image-gallery .gallery-item:nth-child(odd) { transform: translateY(2rem); }
.about-split .gallery-item { aspect-ratio: 3 / 4; overflow: hidden; border-radius: 0.75rem; }
@media (max-width: 768px) { .about-split .about-refit { grid-template-columns: 1fr; } }
</style>"""

_CENTERED_CSS = """<style>
.about-centered .about-copy { max-width: 48rem; margin: 0 auto; text-align: center; }
.about-centered .about-tags { justify-content: center; }
.about-centered .image-gallery { display: grid; grid-template-columns: repeat(4, 1fr); gap: 1rem; margin-top: 4rem; }
.about-centered .gallery-item { aspect-ratio: 1; overflow: hidden; }
@media (max-width: 768px) { .about-centered .image-gallery { grid-template-columns: repeat(2, 1fr); } }
</style>"""

_MOSAIC_CSS = """<style>
.about-mosaic .image-gallery { display: grid; grid-template-columns: 2fr 1fr 1fr; grid-auto-rows: 14rem; gap: 0.75rem; margin-bottom: 3rem; }
.about-mosaic .gallery-item { overflow: hidden; opacity: 0; transform: translateY(24px); transition: opacity 0.8s ease, transform 0.8s ease; }
.about-mosaic .gallery-item:first-child { grid-row: span 2; }
.about-mosaic .gallery-item.visible { opacity: 1; transform: none; }
.about-mosaic .about-copy { display: grid; grid-template-columns: 1fr 2fr; gap: 3rem; }
</style>"""

_DARK_CSS = """<style>
.about-dark { background: #111827; color: #ffffff; }
.about-dark .about-intro { display: grid; grid-template-columns: 1fr 1fr; gap: 4rem; margin-bottom: 5rem; }
.about-dark .headline .accent { background: linear-gradient(90deg, #6B8F71, #4ECDC4); -webkit-background-clip: text; background-clip: text; color: transparent; }
.about-dark .description { border-left: 2px solid #6B8F71; padding-left: 1.5rem; opacity: 0.75; }
.about-dark .image-gallery { position: relative; min-height: 16rem; border-radius: 1rem; overflow: hidden; }
.about-dark .image-gallery img { position: absolute; inset: 0; opacity: 0.6; transition: opacity 0.5s ease; }
.about-dark .image-gallery:hover img { opacity: 1; }
.about-dark .usp-list { display: grid; grid-template-columns: repeat(3, 1fr); gap: 1.5rem; list-style: none; margin: 0; padding: 0; }
.about-dark .usp-item { padding: 2rem; border-radius: 0.75rem; background: #1F2937; transition: background 0.3s ease; }
.about-dark .usp-item:hover { background: #374151; }
.about-dark .usp-icon { width: 3rem; height: 3rem; display: flex; align-items: center; justify-content: center; border-radius: 0.5rem; background: #374151; margin-bottom: 1.5rem; }
.about-dark .usp-icon svg { width: 1.5rem; height: 1.5rem; }
@media (max-width: 768px) {
    .about-dark .about-intro, .about-dark .usp-list { grid-template-columns: 1fr; }
}
</style>"""

_JOURNEY_CSS = """<style>
.about-journey { background: #FAFAF9; }
.about-journey .about-copy { max-width: 48rem; margin: 0 auto 6rem; text-align: center; }
.about-journey .headline { font-family: Georgia, serif; }
.about-journey .about-tags { justify-content: center; }
.about-journey .usp-list { position: relative; list-style: none; margin: 0; padding: 0; }
.about-journey .usp-list::before { content: ""; position: absolute; top: 0; bottom: 0; left: 50%; width: 1px; border-left: 1px dashed #E3E6E3; }
.about-journey .usp-item { position: relative; width: 45%; margin-bottom: 6rem; }
.about-journey .usp-item:last-child { margin-bottom: 0; }
.about-journey .usp-item:nth-child(odd) { text-align: right; }
.about-journey .usp-item:nth-child(even) { margin-left: 55%; }
.about-journey .usp-item::after { content: ""; position: absolute; top: 0.5rem; width: 1rem; height: 1rem; border: 2px solid #6B8F71; border-radius: 9999px; background: #ffffff; }
.about-journey .usp-item:nth-child(odd)::after { right: calc(-11.1% - 0.5rem); }
.about-journey .usp-item:nth-child(even)::after { left: calc(-11.1% - 0.5rem); }
.about-journey .milestone-phase { display: block; font-family: monospace; letter-spacing: 0.12em; color: #6B8F71; margin-bottom: 0.5rem; }
.about-journey .usp-title { font-family: Georgia, serif; font-size: 1.875rem; margin: 0 0 1rem; }
@media (max-width: 768px) {
    .about-journey .usp-list::before { left: 2rem; }
    .about-journey .usp-item, .about-journey .usp-item:nth-child(even) { width: auto; margin-left: 5rem; text-align: left; }
    .about-journey .usp-item:nth-child(odd)::after, .about-journey .usp-item:nth-child(even)::after { left: -3.5rem; right: auto; }
}
</style>"""

_ICON_PATHS = (
    "M13 10V3L4 14h7v7l9-11h-7z",
    "M9 12l2 2 4-4m6 2a9 9 0 11-18 0 9 9 0 0118 0z",
    "M12 4.354a4 4 0 110 5.292M15 21H3v-1a6 6 0 0112 0v1zm0 0h6v-1a6 6 0 00-9-5.197M13 7a4 4 0 11-8 0 4 4 0 018 0z",
)

_REVEAL_SCRIPT = """
(function () {
    var items = document.querySelectorAll('.about-mosaic .gallery-item');
    if (!items.length) return;
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
    }, { threshold: 0.2 });
    items.forEach(function (el) { observer.observe(el); });
})();
"""


def _copy_blocks(props: SectionProps) -> str:
    """Render badge, headline, description, tagline and tags."""
    content = props.content
    headline = text_or(
        content.about_headline,
        DEFAULT_HEADLINE_TEMPLATE.format(business_name=content.business_name),
    )
    description = text_or(content.about_description, content.about)
    parts = [
        optional(
            is_visible(props.visibility, "about_badge"),
            f'<span class="about-badge font-manrope">{escape(DEFAULT_BADGE)}</span>',
        ),
        optional(
            is_visible(props.visibility, "about_headline"),
            f'<h2 class="headline font-dm-sans">{escape(headline)}</h2>',
        ),
        optional(
            is_visible(props.visibility, "about_description"),
            f'<p class="description font-manrope">{escape(description)}</p>',
        ),
    ]
    if content.about_tagline:
        parts.append(f'<p class="about-tagline font-manrope">{escape(content.about_tagline)}</p>')
    if content.about_tags:
        tags = "".join(f'<li class="about-tag">{escape(tag)}</li>' for tag in content.about_tags)
        parts.append(f'<ul class="about-tags">{tags}</ul>')
    return "\n".join(part for part in parts if part)


def _gallery_photos(props: SectionProps) -> list[str]:
    if not is_visible(props.visibility, "about_images"):
        return []
    return limit(props.photos, MAX_IMAGES)


def _gallery(props: SectionProps, photos: list[str]) -> str:
    if not photos:
        return ""
    items = "".join(
        f'<div class="gallery-item"><img src="{image_src(photo)}" '
        f'alt="{escape(props.content.business_name)}"></div>'
        for photo in photos
    )
    return f'<div class="image-gallery">{items}</div>'


def _points(props: SectionProps, defaults: tuple[str, ...]) -> list[str]:
    """Get exactly three selling points, topped up from the defaults."""
    points = [point for point in props.content.unique_selling_points or [] if point.strip()]
    return (points + list(defaults))[:POINT_COUNT]


def _icon(index: int) -> str:
    path = _ICON_PATHS[index % len(_ICON_PATHS)]
    return (
        '<svg fill="none" stroke="currentColor" viewBox="0 0 24 24">'
        f'<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="{path}"/></svg>'
    )


@register("1", "Split", uses={"badge", "headline", "description", "tagline", "tags", "images"})
def about_style_1(props: SectionProps) -> str:
    """Copy on the left, staggered two-column gallery on the right."""
    photos = _gallery_photos(props)
    return f'''
    <section class="about-refit-wrapper about-split" id="about">
        {_BASE_CSS}
        {_SPLIT_CSS}
        <div class="about-refit">
            <div class="about-copy">
                {_copy_blocks(props)}
            </div>
            {_gallery(props, photos)}
        </div>
    </section>'''


@register("2", "Centered", uses={"badge", "headline", "description", "tagline", "tags", "images"})
def about_style_2(props: SectionProps) -> str:
    """Centered statement with a strip of square photos below."""
    photos = _gallery_photos(props)
    return f'''
    <section class="about-refit-wrapper about-centered" id="about">
        {_BASE_CSS}
        {_CENTERED_CSS}
        <div class="about-refit">
            <div class="about-copy">
                {_copy_blocks(props)}
            </div>
            {_gallery(props, photos)}
        </div>
    </section>'''


@register("3", "Mosaic", uses={"badge", "headline", "description", "tagline", "tags", "images"})
def about_style_3(props: SectionProps) -> str:
    """Photo mosaic revealed on scroll, copy underneath."""
    photos = _gallery_photos(props)
    return f'''
    <section class="about-refit-wrapper about-mosaic" id="about">
        {_BASE_CSS}
        {_MOSAIC_CSS}
        <div class="about-refit">
            {_gallery(props, photos)}
            <div class="about-copy">
                {_copy_blocks(props)}
            </div>
        </div>
        {optional(bool(photos), script_block(_REVEAL_SCRIPT))}
    </section>'''


@register("4", "Dark Feature", uses={"headline", "description", "images", "usps"})
def about_style_4(props: SectionProps) -> str:
    """High-contrast intro with one photo and three selling point cards."""
    content = props.content
    if content.about_headline and content.about_headline.strip():
        headline = escape(content.about_headline)
    else:
        headline = f'About <span class="accent">{escape(content.business_name)}</span>'
    headline_html = optional(
        is_visible(props.visibility, "about_headline"),
        f'<h2 class="headline font-dm-sans">{headline}</h2>',
    )
    description_html = optional(
        is_visible(props.visibility, "about_description"),
        f'<p class="description font-manrope">{escape(text_or(content.about_description, content.about))}</p>',
    )
    cards = "".join(
        f'''
            <li class="usp-item">
                <div class="usp-icon">{_icon(i)}</div>
                <h3 class="usp-title font-dm-sans">{escape(point)}</h3>
                <p class="usp-text font-manrope">{escape(DEFAULT_FEATURE_TEXT)}</p>
            </li>'''
        for i, point in enumerate(_points(props, DEFAULT_FEATURE_POINTS))
    )
    return f'''
    <section class="about-refit-wrapper about-dark" id="about">
        {_BASE_CSS}
        {_DARK_CSS}
        <div class="about-refit">
            <div class="about-intro">
                <div class="about-copy">
                    {headline_html}
                    {description_html}
                </div>
                {_gallery(props, limit(_gallery_photos(props), 1))}
            </div>
            <ul class="usp-list">{cards}</ul>
        </div>
    </section>'''


@register("5", "Editorial Journey", uses={"badge", "headline", "description", "tagline", "tags", "usps"})
def about_style_5(props: SectionProps) -> str:
    """Centered story above a three-phase timeline."""
    milestones = "".join(
        f'''
            <li class="usp-item">
                <span class="milestone-phase font-manrope">Phase {i + 1}</span>
                <h3 class="usp-title">{escape(point)}</h3>
                <p class="usp-text font-manrope">{escape(MILESTONE_TEXT[i])}</p>
            </li>'''
        for i, point in enumerate(_points(props, DEFAULT_MILESTONES))
    )
    return f'''
    <section class="about-refit-wrapper about-journey" id="about">
        {_BASE_CSS}
        {_JOURNEY_CSS}
        <div class="about-refit">
            <div class="about-copy">
                {_copy_blocks(props)}
            </div>
            <ol class="usp-list">{milestones}</ol>
        </div>
    </section>'''
