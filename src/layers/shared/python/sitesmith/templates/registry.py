"""Style registry: section kind and style id to generator.

New variants only need a decorated generator in their section module; the
tables below pick them up.
"""

import structlog

from sitesmith.models.style import DEFAULT_STYLE_ID, SectionKind
from sitesmith.templates.about import ABOUT_STYLES
from sitesmith.templates.base import SectionProps, StyleSpec
from sitesmith.templates.featured import FEATURED_STYLES
from sitesmith.templates.footer import FOOTER_STYLES
from sitesmith.templates.hero import HERO_STYLES
from sitesmith.templates.navbar import NAVBAR_STYLES
from sitesmith.templates.services import SERVICES_STYLES

logger = structlog.get_logger()

STYLE_REGISTRY: dict[SectionKind, dict[str, StyleSpec]] = {
    SectionKind.NAVBAR: NAVBAR_STYLES,
    SectionKind.HERO: HERO_STYLES,
    SectionKind.ABOUT: ABOUT_STYLES,
    SectionKind.SERVICES: SERVICES_STYLES,
    SectionKind.FEATURED: FEATURED_STYLES,
    SectionKind.FOOTER: FOOTER_STYLES,
}


def get_style(kind: SectionKind | str, style_id: str | None) -> StyleSpec:
    """Get the style for a section kind, falling back to the default id.

    Args:
        kind: Section kind.
        style_id: Requested style id. Unknown or empty ids resolve to "1".

    Returns:
        The registered StyleSpec.
    """
    table = STYLE_REGISTRY[SectionKind(kind)]
    spec = table.get(style_id or "")
    if spec is None:
        logger.debug(
            "Unknown style id, using default",
            kind=SectionKind(kind).value,
            style_id=style_id,
        )
        spec = table[DEFAULT_STYLE_ID]
    return spec


def dispatch(kind: SectionKind | str, style_id: str | None, props: SectionProps) -> str:
    """Render a section with the requested style.

    Args:
        kind: Section kind.
        style_id: Style id, resolved through the default fallback.
        props: Generator inputs.

    Returns:
        HTML fragment.
    """
    return get_style(kind, style_id).generator(props)


def list_styles(kind: SectionKind | str) -> list[StyleSpec]:
    """List registered styles of a section kind, ordered by id."""
    table = STYLE_REGISTRY[SectionKind(kind)]
    return [table[style_id] for style_id in sorted(table, key=_style_sort_key)]


def get_style_fields(kind: SectionKind | str, style_id: str | None) -> frozenset[str]:
    """Get the editor fields a style consumes.

    Editors hide controls for fields the active variant never renders.
    """
    return get_style(kind, style_id).uses


def _style_sort_key(style_id: str) -> tuple[int, str]:
    return (int(style_id), "") if style_id.isdigit() else (10**6, style_id)
