"""Section generators, style registry and the selector contract."""

from sitesmith.templates.base import SectionProps, StyleSpec
from sitesmith.templates.common import PENDING_IMAGE_URL, is_visible
from sitesmith.templates.contract import FIELD_SELECTORS, WRAPPER_CLASSES, selector_for
from sitesmith.templates.registry import (
    STYLE_REGISTRY,
    dispatch,
    get_style,
    get_style_fields,
    list_styles,
)

__all__ = [
    "FIELD_SELECTORS",
    "PENDING_IMAGE_URL",
    "STYLE_REGISTRY",
    "SectionProps",
    "StyleSpec",
    "WRAPPER_CLASSES",
    "dispatch",
    "get_style",
    "get_style_fields",
    "is_visible",
    "list_styles",
    "selector_for",
]
