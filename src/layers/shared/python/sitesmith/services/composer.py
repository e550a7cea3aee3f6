"""Composer: rebuild a full HTML document from a content record.

The base document is parsed once, every piece of previously generated
content is stripped, and all enabled sections are rendered afresh in fixed
order. The composer never patches sections in place, so composing the same
inputs always yields the same document.
"""

from collections.abc import Sequence

import structlog
from bs4 import BeautifulSoup, Doctype, NavigableString, Tag

from sitesmith.models.content import MASTER_FLAGS, ContentRecord
from sitesmith.models.style import SECTION_ORDER, SectionKind, StyleSelection
from sitesmith.services.asset_resolver import is_resolved
from sitesmith.services.theme import (
    COLOR_STYLE_ID,
    FONT_LINK_ID,
    FONT_STYLE_ID,
    generate_color_scheme_css,
    generate_font_css,
    generate_font_link,
)
from sitesmith.templates.base import SectionProps
from sitesmith.templates.common import PENDING_IMAGE_URL, is_visible
from sitesmith.templates.contract import WRAPPER_CLASSES
from sitesmith.templates.registry import dispatch

logger = structlog.get_logger()

DEFAULT_BASE_DOCUMENT = (
    "<!DOCTYPE html>"
    '<html lang="en"><head>'
    '<meta charset="utf-8">'
    '<meta name="viewport" content="width=device-width, initial-scale=1">'
    "<title></title>"
    "</head><body><main></main></body></html>"
)

# Top-level body elements treated as generated content.
DYNAMIC_BODY_TAGS = ("nav", "header", "footer", "section")

CONTENT_SECTIONS = frozenset(
    {SectionKind.HERO, SectionKind.ABOUT, SectionKind.SERVICES, SectionKind.FEATURED}
)


def _displayable(photos: Sequence[str] | None) -> list[str]:
    """Replace anything that is not a fetchable URL with the placeholder."""
    return [
        photo if photo == PENDING_IMAGE_URL or is_resolved(photo) else PENDING_IMAGE_URL
        for photo in photos or []
    ]


def section_photos(
    kind: SectionKind | str,
    content: ContentRecord,
    pool: Sequence[str] | None,
) -> list[str]:
    """Pick the photos a section renders.

    Sections with their own image field use it once set; an explicit list
    replaces the shared pool entirely.

    Args:
        kind: Section kind.
        content: Content record with resolved image fields.
        pool: Shared pool of resolved photos.

    Returns:
        Displayable photo URLs in order.
    """
    kind = SectionKind(kind)
    pool = list(pool or [])

    if kind == SectionKind.HERO:
        photos = content.hero_images if content.hero_images is not None else pool
    elif kind == SectionKind.ABOUT:
        photos = content.about_images if content.about_images is not None else pool
    elif kind == SectionKind.SERVICES:
        photos = [content.services_image] if content.services_image else pool
    elif kind == SectionKind.FEATURED:
        photos = content.featured_images if content.featured_images is not None else pool
    else:
        photos = []

    return _displayable(photos)


def _ensure_structure(soup: BeautifulSoup) -> tuple[Tag, Tag, Tag]:
    """Make sure the document has html, head and body elements.

    Returns:
        Tuple of (head, body, title).
    """
    html = soup.find("html")
    if html is None:
        html = soup.new_tag("html")
        for child in list(soup.contents):
            if not isinstance(child, Doctype):
                html.append(child.extract())
        soup.append(html)

    head = html.find("head")
    if head is None:
        head = soup.new_tag("head")
        html.insert(0, head)

    body = html.find("body")
    if body is None:
        body = soup.new_tag("body")
        for child in list(html.contents):
            if child is not head:
                body.append(child.extract())
        html.append(body)

    title = head.find("title")
    if title is None:
        title = soup.new_tag("title")
        head.append(title)

    return head, body, title


def _drop_blank_strings(parent: Tag) -> None:
    """Remove whitespace-only text nodes directly under a parent."""
    for child in list(parent.contents):
        if type(child) is NavigableString and not child.strip():
            child.extract()


def _strip_dynamic_content(soup: BeautifulSoup, head: Tag, body: Tag) -> None:
    """Remove everything a previous composition added.

    Blank text nodes at the top level and directly in body go too, so a
    composed document recomposes to the same text.
    """
    for element_id in (COLOR_STYLE_ID, FONT_STYLE_ID, FONT_LINK_ID):
        for el in head.find_all(id=element_id):
            el.decompose()

    for el in body.find_all(DYNAMIC_BODY_TAGS, recursive=False):
        el.decompose()

    for wrapper_class in WRAPPER_CLASSES.values():
        for el in body.find_all(class_=wrapper_class):
            el.decompose()

    main = body.find("main")
    if main is not None:
        main.clear()

    _drop_blank_strings(soup)
    _drop_blank_strings(body)


def _parse_fragment(markup: str) -> list:
    """Parse a fragment into detached nodes."""
    fragment = BeautifulSoup(markup.strip(), "html.parser")
    return [node.extract() for node in list(fragment.contents)]


def compose(
    base_document: str | None,
    content: ContentRecord,
    styles: StyleSelection | None = None,
    photos: Sequence[str] | None = None,
    *,
    year: int | None = None,
) -> str:
    """Compose the full site document.

    Args:
        base_document: Template document. Its head is kept; generated body
            content is rebuilt.
        content: Content record with resolved image fields.
        styles: Style selection. Defaults to style "1" everywhere.
        photos: Shared pool of resolved photos.
        year: Copyright year; the current year when None.

    Returns:
        Serialized HTML document.
    """
    styles = styles or StyleSelection()
    soup = BeautifulSoup(base_document or DEFAULT_BASE_DOCUMENT, "html.parser")
    head, body, title = _ensure_structure(soup)

    title.string = f"{content.business_name} - {content.tagline}"
    _strip_dynamic_content(soup, head, body)

    main = body.find("main")
    if main is None:
        main = soup.new_tag("main")
        body.append(main)

    rendered: list[str] = []
    navbar_index = 0
    footer_anchor: Tag = main

    for kind in SECTION_ORDER:
        style_id = styles.style_for(kind)
        if style_id is None or not is_visible(content.visibility, MASTER_FLAGS[kind.value]):
            continue

        props = SectionProps(
            content=content,
            visibility=content.section_visibility(kind.value),
            photos=section_photos(kind, content, photos),
            year=year,
        )
        nodes = _parse_fragment(dispatch(kind, style_id, props))

        if kind == SectionKind.NAVBAR:
            for node in nodes:
                body.insert(navbar_index, node)
                navbar_index += 1
        elif kind in CONTENT_SECTIONS:
            for node in nodes:
                main.append(node)
        else:
            for node in nodes:
                footer_anchor.insert_after(node)
                footer_anchor = node

        rendered.append(kind.value)

    for node in _parse_fragment(generate_color_scheme_css(styles.color_scheme)):
        head.append(node)
    if styles.font_pairing:
        for node in _parse_fragment(generate_font_link(styles.font_pairing)):
            head.append(node)
        for node in _parse_fragment(generate_font_css(styles.font_pairing)):
            head.append(node)

    logger.info(
        "Document composed",
        business_name=content.business_name,
        sections=rendered,
        color_scheme=styles.color_scheme,
        font_pairing=styles.font_pairing,
    )

    return str(soup)
