"""Service classes for site composition and editing."""

from sitesmith.services.asset_resolver import AssetResolver, make_reference, parse_reference
from sitesmith.services.composer import DEFAULT_BASE_DOCUMENT, compose, section_photos
from sitesmith.services.editor import EditorController, EditorState, LogNotifier
from sitesmith.services.preview import PreviewSurface, PreviewSync
from sitesmith.services.storage import S3AssetStorage, UploadTarget, get_asset_storage
from sitesmith.services.theme import (
    COLOR_SCHEMES,
    FONT_PAIRINGS,
    generate_color_scheme_css,
    generate_font_css,
    generate_font_link,
    get_color_scheme,
    get_contrast_color,
    get_font_pairing,
)

__all__ = [
    "COLOR_SCHEMES",
    "DEFAULT_BASE_DOCUMENT",
    "FONT_PAIRINGS",
    "AssetResolver",
    "EditorController",
    "EditorState",
    "LogNotifier",
    "PreviewSurface",
    "PreviewSync",
    "S3AssetStorage",
    "UploadTarget",
    "compose",
    "generate_color_scheme_css",
    "generate_font_css",
    "generate_font_link",
    "get_asset_storage",
    "get_color_scheme",
    "get_contrast_color",
    "get_font_pairing",
    "make_reference",
    "parse_reference",
    "section_photos",
]
