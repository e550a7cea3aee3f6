"""Asset resolution for opaque image references.

Image fields hold either a fetchable http(s) URL or an opaque reference of
the form ``<scheme>:<id>``. Opaque ids are looked up in one batch per input
array and written back by matching ids, never by response order.
"""

import asyncio
import re
from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from sitesmith.models.content import ContentRecord
from sitesmith.templates.common import PENDING_IMAGE_URL

logger = structlog.get_logger()

HTTP_URL_RE = re.compile(r"^https?://", re.IGNORECASE)
REFERENCE_RE = re.compile(r"^(?P<scheme>[a-z][a-z0-9+.-]*):(?P<id>[^\s/][^\s]*)$", re.IGNORECASE)

DEFAULT_SCHEME = "storage"


def is_resolved(ref: str | None) -> bool:
    """Check whether a reference is already a fetchable URL."""
    return bool(ref) and bool(HTTP_URL_RE.match(ref))


def parse_reference(ref: str | None) -> tuple[str, str] | None:
    """Split an opaque reference into (scheme, id).

    Returns:
        The pair, or None for http(s) URLs and malformed values.
    """
    if not ref or is_resolved(ref):
        return None
    match = REFERENCE_RE.match(ref.strip())
    if not match:
        return None
    return match.group("scheme"), match.group("id")


def make_reference(storage_id: str, scheme: str = DEFAULT_SCHEME) -> str:
    """Build an opaque reference from a storage id."""
    return f"{scheme}:{storage_id}"


class AssetResolver:
    """Resolve opaque image references through a lookup collaborator.

    The lookup exposes ``resolve_many(ids)``, sync or async, returning either
    a list of URLs (None for unknown ids) in input order or a mapping of id
    to URL.

    Example usage:
        resolver = AssetResolver(S3AssetStorage())
        urls = await resolver.resolve(["storage:abc", "https://cdn/x.jpg"])
    """

    def __init__(self, lookup: Any, scheme: str = DEFAULT_SCHEME):
        """Initialize the resolver.

        Args:
            lookup: Collaborator with a resolve_many(ids) method.
            scheme: Reference scheme this resolver handles.
        """
        self.lookup = lookup
        self.scheme = scheme
        self._cache: dict[str, str] = {}
        self.logger = logger.bind(service="asset_resolver")

    async def resolve(self, refs: Sequence[str] | None) -> list[str | None]:
        """Resolve one array of references, preserving positions.

        Args:
            refs: Image references, any mix of URLs and opaque references.

        Returns:
            A list of the same length: URLs, or None where a reference could
            not be resolved.
        """
        refs = list(refs or [])
        ids: list[str] = []
        for ref in refs:
            parsed = parse_reference(ref)
            if parsed and parsed[0] == self.scheme and parsed[1] not in self._cache and parsed[1] not in ids:
                ids.append(parsed[1])

        if ids:
            self._cache.update(await self._lookup(ids))

        resolved: list[str | None] = []
        for ref in refs:
            if is_resolved(ref):
                resolved.append(ref)
                continue
            parsed = parse_reference(ref)
            if parsed and parsed[0] == self.scheme:
                resolved.append(self._cache.get(parsed[1]))
            else:
                resolved.append(None)
        return resolved

    async def _lookup(self, ids: list[str]) -> dict[str, str]:
        """Run one batched lookup and key the results by id.

        Blocking lookups run in a worker thread so that concurrent batches
        overlap. Failures are logged and yield no entries.
        """
        try:
            if asyncio.iscoroutinefunction(self.lookup.resolve_many):
                response = await self.lookup.resolve_many(ids)
            else:
                response = await asyncio.to_thread(self.lookup.resolve_many, ids)
        except Exception as e:
            self.logger.warning("Asset lookup failed", error=str(e), count=len(ids))
            return {}

        if isinstance(response, Mapping):
            found = {key: url for key, url in response.items() if key in ids and url}
        else:
            urls = list(response or [])
            if len(urls) != len(ids):
                self.logger.warning(
                    "Asset lookup returned wrong count",
                    expected=len(ids),
                    received=len(urls),
                )
            found = {storage_id: url for storage_id, url in zip(ids, urls) if url}

        self.logger.debug("Assets resolved", requested=len(ids), found=len(found))
        return found

    async def resolve_or_pending(self, refs: Sequence[str] | None) -> list[str]:
        """Resolve references, substituting the pending placeholder for misses."""
        return [url or PENDING_IMAGE_URL for url in await self.resolve(refs)]

    async def resolve_content(
        self,
        content: ContentRecord,
        pool: Sequence[str] | None = None,
    ) -> tuple[ContentRecord, list[str]]:
        """Resolve every image field of a record plus the shared pool.

        Each array is looked up as its own batch; batches run concurrently.

        Args:
            content: Record whose image fields may hold opaque references.
            pool: Shared "available images" pool.

        Returns:
            A resolved copy of the record and the resolved pool. Unresolved
            slots hold the pending placeholder.
        """
        products = content.featured_products or []
        product_refs = [product.image or "" for product in products]

        (
            hero_images,
            about_images,
            featured_images,
            services_image,
            product_images,
            resolved_pool,
        ) = await asyncio.gather(
            self._resolve_optional(content.hero_images),
            self._resolve_optional(content.about_images),
            self._resolve_optional(content.featured_images),
            self._resolve_optional([content.services_image] if content.services_image else None),
            self.resolve(product_refs),
            self.resolve_or_pending(pool),
        )

        update: dict[str, Any] = {
            "hero_images": hero_images,
            "about_images": about_images,
            "featured_images": featured_images,
            "services_image": services_image[0] if services_image else None,
        }
        if content.featured_products is not None:
            update["featured_products"] = [
                product.model_copy(
                    update={"image": (url or PENDING_IMAGE_URL) if product.image else None}
                )
                for product, url in zip(products, product_images)
            ]

        return content.model_copy(update=update), resolved_pool

    async def _resolve_optional(self, refs: Sequence[str] | None) -> list[str] | None:
        """Resolve an optional array, keeping None (unset) distinct from empty."""
        if refs is None:
            return None
        return await self.resolve_or_pending(refs)
