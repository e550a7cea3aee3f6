"""Hero style generators.

Every variant renders inside ``.hero-refit-wrapper > .hero-refit`` and tags
its editable elements with the same classes (h1, .tagline, .description,
.cta-button, .testimonial-card, .image-container) so highlighting works
whichever variant is active.
"""

from sitesmith.models.style import SectionKind
from sitesmith.templates.base import SectionProps, StyleSpec, style_registrar
from sitesmith.templates.common import (
    cycle_to_minimum,
    escape,
    image_src,
    is_visible,
    limit,
    optional,
    sanitize_url,
    script_block,
    text_or,
)

HERO_STYLES: dict[str, StyleSpec] = {}
register = style_registrar(SectionKind.HERO, HERO_STYLES)

DEFAULT_CTA_LABEL = "Work with us"
DEFAULT_CTA_LINK = "#contact"
DEFAULT_BADGE_TEXT = "Available for new projects"
SLIDESHOW_LIMIT = 4
CAROUSEL_MINIMUM = 8

_BASE_CSS = """<style>
.hero-refit-wrapper { position: relative; width: 100%; overflow: hidden; }
.hero-refit { position: relative; max-width: 80rem; margin: 0 auto; padding: 4rem 1.5rem; }
.hero-refit h1 { margin: 0; line-height: 0.9; letter-spacing: -0.03em; }
.hero-refit .tagline { font-size: 1.125rem; font-style: italic; }
.hero-refit .description { max-width: 36rem; opacity: 0.8; }
.hero-refit .availability-badge { display: inline-flex; align-items: center; gap: 0.5rem; font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.1em; }
.hero-refit .availability-badge .dot { width: 0.5rem; height: 0.5rem; border-radius: 9999px; }
.hero-refit .cta-button { display: inline-flex; align-items: center; gap: 0.75rem; padding: 0.75rem 1.75rem; text-decoration: none; font-weight: 600; text-transform: uppercase; letter-spacing: 0.1em; font-size: 0.75rem; }
.hero-refit .cta-button .arrow-icon { display: inline-flex; width: 1.75rem; height: 1.75rem; border-radius: 9999px; align-items: center; justify-content: center; }
.hero-refit .testimonial-card { max-width: 22rem; padding: 1.25rem; border-radius: 1rem; background: rgba(255, 255, 255, 0.08); }
.hero-refit .testimonial-stars { display: flex; gap: 0.125rem; }
.hero-refit .image-container img { width: 100%; height: 100%; object-fit: cover; display: block; }
</style>"""

_SLIDESHOW_CSS = """<style>
.hero-slideshow .image-container { position: relative; height: clamp(320px, 55vw, 600px); margin-top: 2rem; }
.hero-slideshow .hero-slide { position: absolute; inset: 0; opacity: 0; transition: opacity 1.2s ease; }
.hero-slideshow .hero-slide.active { opacity: 1; }
.hero-slideshow h1 { font-size: clamp(3.5rem, 16vw, 14rem); text-align: center; }
.hero-slideshow .hero-copy { display: flex; justify-content: space-between; gap: 2rem; margin-top: 2rem; }
</style>"""

_SLIDESHOW_SCRIPT = """
(function () {
    var slides = document.querySelectorAll('.hero-slideshow .hero-slide');
    if (slides.length < 2) return;
    var current = 0;
    setInterval(function () {
        slides[current].classList.remove('active');
        current = (current + 1) % slides.length;
        slides[current].classList.add('active');
    }, 6000);
})();
"""

_DARK_CSS = """<style>
.hero-dark { min-height: 100vh; display: flex; align-items: flex-end; color: #ffffff; }
.hero-dark .image-container { position: absolute; inset: 0; }
.hero-dark .gradient-overlay { position: absolute; inset: 0; background: linear-gradient(to top, rgba(0, 0, 0, 0.85), rgba(0, 0, 0, 0.1)); }
.hero-dark .hero-refit { z-index: 1; width: 100%; }
.hero-dark h1 { font-size: clamp(3rem, 12vw, 9rem); }
.hero-dark .accent-bar { width: 4rem; height: 3px; margin-bottom: 1.5rem; background: currentColor; }
</style>"""

_CAROUSEL_CSS = """<style>
@keyframes heroMarquee { from { transform: translateX(0); } to { transform: translateX(-50%); } }
.hero-carousel .carousel-track { display: flex; gap: 1rem; width: max-content; animation: heroMarquee 40s linear infinite; }
.hero-carousel .carousel-track.paused { animation-play-state: paused; }
.hero-carousel .carousel-tile { width: 18rem; height: 22rem; flex: none; border-radius: 1rem; overflow: hidden; }
.hero-carousel .image-container { overflow: hidden; margin-top: 3rem; }
.hero-carousel .hero-copy { text-align: center; }
.hero-carousel h1 { font-size: clamp(2.5rem, 8vw, 6rem); }
</style>"""

_CAROUSEL_SCRIPT = """
(function () {
    var track = document.querySelector('.hero-carousel .carousel-track');
    if (!track) return;
    track.addEventListener('mouseenter', function () { track.classList.add('paused'); });
    track.addEventListener('mouseleave', function () { track.classList.remove('paused'); });
})();
"""

_MINIMAL_CSS = """<style>
.hero-minimal { background: #ffffff; }
.hero-minimal .hero-refit { display: grid; grid-template-columns: 1.2fr 1fr; gap: 3rem; align-items: center; min-height: 80vh; }
.hero-minimal h1 { font-size: clamp(2.5rem, 6vw, 5rem); }
.hero-minimal .image-container { aspect-ratio: 4 / 5; overflow: hidden; }
@media (max-width: 768px) { .hero-minimal .hero-refit { grid-template-columns: 1fr; } }
</style>"""

_GLASS_CSS = """<style>
.hero-glass { min-height: 100vh; display: flex; align-items: center; }
.hero-glass .image-container { position: absolute; inset: 0; }
.hero-glass .glass-panel { position: relative; z-index: 1; padding: 3rem; border-radius: 1.5rem; background: rgba(255, 255, 255, 0.12); backdrop-filter: blur(18px); -webkit-backdrop-filter: blur(18px); border: 1px solid rgba(255, 255, 255, 0.25); color: #ffffff; max-width: 40rem; }
.hero-glass h1 { font-size: clamp(2.5rem, 7vw, 5.5rem); }
</style>"""

_STAR = (
    '<svg width="14" height="14" viewBox="0 0 24 24">'
    '<path d="M12 2l3 7h7l-5.5 4.5 2 7.5-6.5-4.5-6.5 4.5 2-7.5L2 9h7z"/></svg>'
)
_ARROW = (
    '<span class="arrow-icon"><svg width="14" height="14" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2"><path d="M7 17L17 7M7 7h10v10"/></svg></span>'
)


def _headline(props: SectionProps, text: str) -> str:
    return optional(
        is_visible(props.visibility, "hero_headline"),
        f'<h1 class="font-dm-sans">{escape(text)}</h1>',
    )


def _tagline(props: SectionProps) -> str:
    return optional(
        is_visible(props.visibility, "hero_tagline"),
        f'<p class="tagline font-manrope">{escape(props.content.tagline)}</p>',
    )


def _description(props: SectionProps) -> str:
    return optional(
        is_visible(props.visibility, "hero_description"),
        f'<p class="description font-manrope">{escape(props.content.about)}</p>',
    )


def _button(props: SectionProps) -> str:
    if not is_visible(props.visibility, "hero_button"):
        return ""
    cta = props.content.hero_cta
    label = text_or(cta.label if cta else None, DEFAULT_CTA_LABEL)
    link = text_or(cta.link if cta else None, DEFAULT_CTA_LINK)
    return (
        f'<a href="{sanitize_url(link)}" class="cta-button font-manrope">'
        f"{escape(label)}{_ARROW}</a>"
    )


def _badge(props: SectionProps) -> str:
    text = text_or(props.content.hero_badge_text, DEFAULT_BADGE_TEXT)
    return (
        f'<div class="availability-badge font-manrope"><span class="dot"></span>'
        f"{escape(text)}</div>"
    )


def _testimonial(props: SectionProps) -> str:
    testimonial = props.content.hero_testimonial
    if not testimonial or not is_visible(props.visibility, "hero_testimonial"):
        return ""
    role = optional(bool(testimonial.role), f'<span class="testimonial-role">{escape(testimonial.role)}</span>')
    return f'''
        <div class="testimonial-card">
            <div class="testimonial-stars">{_STAR * 5}</div>
            <p class="testimonial-quote font-manrope">&ldquo;{escape(testimonial.quote)}&rdquo;</p>
            <p class="testimonial-author font-manrope">{escape(testimonial.author)} {role}</p>
        </div>'''


def _single_image(props: SectionProps) -> str:
    if not props.photos or not is_visible(props.visibility, "hero_image"):
        return ""
    return (
        '<div class="image-container">'
        f'<img src="{image_src(props.photos[0])}" alt="{escape(props.content.business_name)}">'
        f"</div>"
    )


@register("1", "Cinematic Slideshow", uses={"badge", "headline", "tagline", "description", "cta", "images"})
def hero_style_1(props: SectionProps) -> str:
    """Oversized name over a crossfading slideshow of up to four photos."""
    slides = limit(props.photos, SLIDESHOW_LIMIT)
    show_images = bool(slides) and is_visible(props.visibility, "hero_image")
    slides_html = "".join(
        f'<img src="{image_src(photo)}" class="hero-slide{" active" if i == 0 else ""}" '
        f'alt="{escape(props.content.business_name)}">'
        for i, photo in enumerate(slides)
    )
    image_block = optional(show_images, f'<div class="image-container">{slides_html}</div>')
    script = optional(show_images and len(slides) > 1, script_block(_SLIDESHOW_SCRIPT))
    return f'''
    <section class="hero-refit-wrapper hero-slideshow" id="hero">
        {_BASE_CSS}
        {_SLIDESHOW_CSS}
        <div class="hero-refit">
            {_badge(props)}
            {_headline(props, props.content.business_name.upper())}
            <div class="hero-copy">
                {_tagline(props)}
                {_description(props)}
            </div>
            {image_block}
            {_button(props)}
        </div>
        {script}
    </section>'''


@register("2", "Dark Cinematic", uses={"headline", "tagline", "cta", "images"})
def hero_style_2(props: SectionProps) -> str:
    """Full-bleed photo under a dark gradient with bold type."""
    return f'''
    <section class="hero-refit-wrapper hero-dark" id="hero">
        {_BASE_CSS}
        {_DARK_CSS}
        {_single_image(props)}
        <div class="gradient-overlay"></div>
        <div class="hero-refit">
            <div class="accent-bar"></div>
            {_headline(props, props.content.business_name.upper())}
            {_tagline(props)}
            {_button(props)}
        </div>
    </section>'''


@register("3", "Carousel", uses={"badge", "headline", "tagline", "description", "cta", "images"})
def hero_style_3(props: SectionProps) -> str:
    """Centered copy above an endlessly scrolling photo strip.

    The strip needs at least eight tiles for a seamless loop, so short photo
    lists are cycled.
    """
    tiles = cycle_to_minimum(props.photos, CAROUSEL_MINIMUM)
    show_images = bool(tiles) and is_visible(props.visibility, "hero_image")
    tiles_html = "".join(
        f'<div class="carousel-tile"><img src="{image_src(photo)}" '
        f'alt="{escape(props.content.business_name)}"></div>'
        for photo in tiles
    )
    image_block = optional(
        show_images,
        f'<div class="image-container"><div class="carousel-track">{tiles_html}</div></div>',
    )
    return f'''
    <section class="hero-refit-wrapper hero-carousel" id="hero">
        {_BASE_CSS}
        {_CAROUSEL_CSS}
        <div class="hero-refit">
            <div class="hero-copy">
                {_badge(props)}
                {_headline(props, props.content.business_name)}
                {_tagline(props)}
                {_description(props)}
                {_button(props)}
            </div>
            {image_block}
        </div>
        {optional(show_images, script_block(_CAROUSEL_SCRIPT))}
    </section>'''


@register("4", "Minimal Split", uses={"headline", "tagline", "description", "cta", "testimonial", "images"})
def hero_style_4(props: SectionProps) -> str:
    """Quiet two-column layout with copy beside a single portrait photo."""
    return f'''
    <section class="hero-refit-wrapper hero-minimal" id="hero">
        {_BASE_CSS}
        {_MINIMAL_CSS}
        <div class="hero-refit">
            <div class="hero-copy">
                {_headline(props, props.content.business_name)}
                {_tagline(props)}
                {_description(props)}
                {_button(props)}
                {_testimonial(props)}
            </div>
            {_single_image(props)}
        </div>
    </section>'''


@register("5", "Glass", uses={"badge", "headline", "tagline", "description", "cta", "testimonial", "images"})
def hero_style_5(props: SectionProps) -> str:
    """Frosted glass panel floating over a full-bleed photo."""
    return f'''
    <section class="hero-refit-wrapper hero-glass" id="hero">
        {_BASE_CSS}
        {_GLASS_CSS}
        {_single_image(props)}
        <div class="hero-refit">
            <div class="glass-panel">
                {_badge(props)}
                {_headline(props, props.content.business_name)}
                {_tagline(props)}
                {_description(props)}
                {_button(props)}
                {_testimonial(props)}
            </div>
        </div>
    </section>'''
