"""HTML helpers shared by all section generators."""

import html as html_module
import re
from collections.abc import Mapping, Sequence
from typing import TypeVar

T = TypeVar("T")

HTTP_URL_RE = re.compile(r"^https?://", re.IGNORECASE)

# Neutral grey tile shown for images whose reference is still pending.
PENDING_IMAGE_URL = (
    "data:image/svg+xml;charset=utf-8,"
    "%3Csvg xmlns='http://www.w3.org/2000/svg' width='4' height='3'%3E"
    "%3Crect width='4' height='3' fill='%23E3E6E3'/%3E%3C/svg%3E"
)


def escape(value: object | None) -> str:
    """Escape a value for safe HTML insertion.

    Args:
        value: Value to escape.

    Returns:
        HTML-escaped string, empty for None.
    """
    if value is None:
        return ""
    return html_module.escape(str(value))


def sanitize_url(url: str | None, default: str = "#") -> str:
    """Sanitize a link target to prevent XSS via script-capable protocols.

    Args:
        url: URL to sanitize.
        default: Value used when the URL is empty or blocked.

    Returns:
        Escaped URL, or the default if invalid.
    """
    if not url:
        return default
    url = str(url).strip()
    if url.lower().startswith(("javascript:", "data:", "vbscript:")):
        return default
    return escape(url)


def image_src(url: str | None) -> str:
    """Get a safe image src attribute value.

    Only fetchable http(s) URLs, site-relative paths and the pending
    placeholder are emitted. Anything else (notably an unresolved
    ``scheme:id`` reference) is shown as the placeholder.
    """
    if not url:
        return PENDING_IMAGE_URL
    if url == PENDING_IMAGE_URL:
        return url
    url = str(url).strip()
    if HTTP_URL_RE.match(url) or url.startswith("/"):
        return escape(url)
    return PENDING_IMAGE_URL


def is_visible(visibility: Mapping[str, bool | None] | None, flag: str) -> bool:
    """Check a visibility flag.

    Absent or None means visible; only an explicit False hides.
    """
    if not visibility:
        return True
    return visibility.get(flag) is not False


def text_or(value: str | None, default: str) -> str:
    """Return the value when it has content, otherwise the default."""
    if value is None or not str(value).strip():
        return default
    return value


def limit(items: Sequence[T] | None, count: int) -> list[T]:
    """Take at most ``count`` items, tolerating None."""
    return list(items or [])[:count]


def cycle_to_minimum(items: Sequence[T] | None, minimum: int) -> list[T]:
    """Pad a list to a minimum length by cycling through it.

    Relative order is preserved and items are only duplicated as needed.
    An empty input stays empty.

    Args:
        items: Source items.
        minimum: Minimum length of the result.

    Returns:
        The padded list.
    """
    items = list(items or [])
    if not items or len(items) >= minimum:
        return items
    return [items[i % len(items)] for i in range(minimum)]


def script_block(body: str) -> str:
    """Wrap an inline script body in a script tag."""
    return f"<script>{body}</script>"


def optional(condition: bool, markup: str) -> str:
    """Return the markup only when the condition holds."""
    return markup if condition else ""
