"""Tests for asset reference resolution."""

import threading
from unittest.mock import AsyncMock, MagicMock

import pytest

from sitesmith.models.content import Product
from sitesmith.services.asset_resolver import (
    AssetResolver,
    is_resolved,
    make_reference,
    parse_reference,
)
from sitesmith.templates.common import PENDING_IMAGE_URL


class TestReferences:
    """Tests for reference parsing."""

    def test_parse_reference(self):
        """Test scheme and id split."""
        assert parse_reference("storage:abc123") == ("storage", "abc123")
        assert parse_reference("https://cdn.example.com/a.jpg") is None
        assert parse_reference("") is None
        assert parse_reference("no scheme") is None

    def test_make_reference(self):
        """Test reference building."""
        assert make_reference("abc") == "storage:abc"
        assert make_reference("abc", "media") == "media:abc"

    def test_is_resolved(self):
        """Test URL detection."""
        assert is_resolved("http://x/a.jpg")
        assert is_resolved("HTTPS://x/a.jpg")
        assert not is_resolved("storage:abc")
        assert not is_resolved(None)


class TestAssetResolver:
    """Tests for AssetResolver."""

    @pytest.mark.asyncio
    async def test_positions_preserved_with_out_of_order_mapping(self):
        """Test results are written back by id, not response order."""
        lookup = MagicMock()
        lookup.resolve_many = MagicMock(
            return_value={"c": "https://cdn/c.jpg", "a": "https://cdn/a.jpg"}
        )
        resolver = AssetResolver(lookup)

        result = await resolver.resolve(["storage:a", "https://cdn/b.jpg", "storage:c"])

        assert result == ["https://cdn/a.jpg", "https://cdn/b.jpg", "https://cdn/c.jpg"]
        lookup.resolve_many.assert_called_once_with(["a", "c"])

    @pytest.mark.asyncio
    async def test_list_response_in_request_order(self):
        """Test list responses align with requested ids."""
        lookup = MagicMock()
        lookup.resolve_many = AsyncMock(return_value=["https://cdn/a.jpg", None])
        resolver = AssetResolver(lookup)

        result = await resolver.resolve(["storage:a", "storage:missing"])

        assert result == ["https://cdn/a.jpg", None]

    @pytest.mark.asyncio
    async def test_one_batch_per_array_and_dedup(self):
        """Test a single lookup per call with unique ids."""
        lookup = MagicMock()
        lookup.resolve_many = AsyncMock(return_value={"a": "https://cdn/a.jpg"})
        resolver = AssetResolver(lookup)

        result = await resolver.resolve(["storage:a", "storage:a"])

        assert result == ["https://cdn/a.jpg", "https://cdn/a.jpg"]
        lookup.resolve_many.assert_awaited_once_with(["a"])

    @pytest.mark.asyncio
    async def test_cache_skips_repeat_lookup(self):
        """Test resolved ids are cached."""
        lookup = MagicMock()
        lookup.resolve_many = MagicMock(return_value={"a": "https://cdn/a.jpg"})
        resolver = AssetResolver(lookup)

        await resolver.resolve(["storage:a"])
        await resolver.resolve(["storage:a"])

        assert lookup.resolve_many.call_count == 1

    @pytest.mark.asyncio
    async def test_urls_only_no_lookup(self):
        """Test URLs pass through without a lookup."""
        lookup = MagicMock()
        resolver = AssetResolver(lookup)

        result = await resolver.resolve(["https://cdn/a.jpg"])

        assert result == ["https://cdn/a.jpg"]
        lookup.resolve_many.assert_not_called()

    @pytest.mark.asyncio
    async def test_lookup_failure_gives_none(self):
        """Test a failing lookup leaves slots unresolved."""
        lookup = MagicMock()
        lookup.resolve_many = AsyncMock(side_effect=RuntimeError("boom"))
        resolver = AssetResolver(lookup)

        result = await resolver.resolve(["storage:a", "https://cdn/b.jpg"])

        assert result == [None, "https://cdn/b.jpg"]

    @pytest.mark.asyncio
    async def test_foreign_scheme_unresolved(self):
        """Test references of other schemes are not looked up."""
        lookup = MagicMock()
        lookup.resolve_many = MagicMock(return_value={})
        resolver = AssetResolver(lookup)

        result = await resolver.resolve(["media:a"])

        assert result == [None]
        lookup.resolve_many.assert_not_called()

    @pytest.mark.asyncio
    async def test_resolve_or_pending(self):
        """Test misses become the pending placeholder."""
        lookup = MagicMock()
        lookup.resolve_many = MagicMock(return_value={})
        resolver = AssetResolver(lookup)

        result = await resolver.resolve_or_pending(["storage:a"])

        assert result == [PENDING_IMAGE_URL]

    @pytest.mark.asyncio
    async def test_resolve_content(self, sample_content):
        """Test every image field of a record is resolved."""
        sample_content.hero_images = ["storage:h1", "https://cdn/h2.jpg"]
        sample_content.services_image = "storage:s1"
        sample_content.featured_products = [
            Product(title="One", image="storage:p1"),
            Product(title="Two"),
        ]
        lookup = MagicMock()
        lookup.resolve_many = AsyncMock(
            side_effect=lambda ids: {i: f"https://cdn/{i}.jpg" for i in ids if i != "p1"}
        )
        resolver = AssetResolver(lookup)

        resolved, pool = await resolver.resolve_content(sample_content, ["storage:pool1"])

        assert resolved.hero_images == ["https://cdn/h1.jpg", "https://cdn/h2.jpg"]
        assert resolved.services_image == "https://cdn/s1.jpg"
        assert resolved.about_images is None
        assert resolved.featured_products[0].image == PENDING_IMAGE_URL
        assert resolved.featured_products[1].image is None
        assert pool == ["https://cdn/pool1.jpg"]
        # Source record untouched
        assert sample_content.hero_images[0] == "storage:h1"

    @pytest.mark.asyncio
    async def test_blocking_lookups_overlap(self, sample_content):
        """Test sync lookups for separate batches run at the same time."""
        sample_content.hero_images = ["storage:h1"]
        sample_content.about_images = ["storage:a1"]
        barrier = threading.Barrier(2, timeout=5)

        def resolve_many(ids):
            # Only passes once both batches are inside a lookup
            barrier.wait()
            return {i: f"https://cdn/{i}.jpg" for i in ids}

        lookup = MagicMock()
        lookup.resolve_many = MagicMock(side_effect=resolve_many)
        resolver = AssetResolver(lookup)

        resolved, _ = await resolver.resolve_content(sample_content)

        assert resolved.hero_images == ["https://cdn/h1.jpg"]
        assert resolved.about_images == ["https://cdn/a1.jpg"]
        assert lookup.resolve_many.call_count == 2
