"""Tests for Pydantic models."""

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from sitesmith.models.base import generate_ulid
from sitesmith.models.content import (
    MASTER_FLAGS,
    VISIBILITY_FLAGS,
    Contact,
    ContentRecord,
    Product,
)
from sitesmith.models.style import SECTION_ORDER, SectionKind, StyleSelection


class TestBaseModel:
    """Tests for BaseModel."""

    def test_generate_ulid(self):
        """Test ULID generation."""
        ulid1 = generate_ulid()
        ulid2 = generate_ulid()

        assert len(ulid1) == 26
        assert ulid1 != ulid2

    def test_model_timestamps(self, sample_content):
        """Test automatic timestamps and version."""
        assert sample_content.created_at is not None
        assert sample_content.updated_at is not None
        assert sample_content.version == 1

    def test_model_serialization(self, full_content):
        """Test DynamoDB serialization drops unset fields."""
        db_item = full_content.to_dynamodb()

        assert db_item["submission_id"] == "sub-789"
        assert db_item["business_name"] == "Studio Nord"
        assert db_item["services"][0] == {"name": "Planning", "description": "Permits and drawings."}
        assert isinstance(db_item["created_at"], str)
        assert "about_headline" not in db_item
        assert "visibility" not in db_item

    def test_model_deserialization(self):
        """Test DynamoDB deserialization."""
        db_item = {
            "PK": "SUBMISSION#sub-1",
            "SK": "CONTENT",
            "id": "content-1",
            "submission_id": "sub-1",
            "business_name": "Acme",
            "tagline": "Tag",
            "about": "About",
            "contact": {"phone": "2024-01-01", "email": "", "address": ""},
            "version": Decimal("3"),
            "created_at": "2024-01-01T12:00:00+00:00",
            "updated_at": "2024-01-01T12:00:00+00:00",
        }

        record = ContentRecord.from_dynamodb(db_item)

        assert record.id == "content-1"
        assert record.version == 3
        assert isinstance(record.created_at, datetime)
        # Date-like business text stays text
        assert record.contact.phone == "2024-01-01"


class TestContentRecord:
    """Tests for ContentRecord model."""

    def test_keys(self, sample_content):
        """Test key generation."""
        assert sample_content.get_pk() == "SUBMISSION#sub-456"
        assert sample_content.get_sk() == "CONTENT"
        assert sample_content.get_keys() == {"PK": "SUBMISSION#sub-456", "SK": "CONTENT"}

    def test_identity_fields_required(self):
        """Test that identity fields are required."""
        with pytest.raises(PydanticValidationError):
            ContentRecord(submission_id="sub-1", business_name="Acme", tagline="Tag")

    def test_identity_fields_reject_blank(self):
        """Test that whitespace-only identity fields are rejected."""
        with pytest.raises(PydanticValidationError):
            ContentRecord(submission_id="sub-1", business_name="   ", tagline="Tag", about="About")

    def test_identity_fields_are_stripped(self):
        """Test identity fields are trimmed."""
        record = ContentRecord(submission_id="sub-1", business_name="  Acme  ", tagline="Tag", about="About")

        assert record.business_name == "Acme"

    def test_business_name_max_length(self):
        """Test business name length limit."""
        with pytest.raises(PydanticValidationError):
            ContentRecord(submission_id="sub-1", business_name="x" * 101, tagline="Tag", about="About")

    def test_optional_fields_default_to_unset(self, sample_content):
        """Test optional fields stay None until set."""
        assert sample_content.navbar_links is None
        assert sample_content.services is None
        assert sample_content.visibility is None
        assert sample_content.hero_images is None

    def test_unknown_visibility_flag_rejected(self, sample_content):
        """Test visibility keys are checked on assignment."""
        with pytest.raises(PydanticValidationError):
            sample_content.visibility = {"made_up_flag": False}

    def test_section_visibility(self, sample_content):
        """Test section visibility sub-map."""
        sample_content.visibility = {"hero_tagline": False, "about_section": False}

        hero = sample_content.section_visibility("hero")

        assert hero["hero_tagline"] is False
        assert hero["hero_headline"] is None
        assert "about_section" not in hero

    def test_navbar_headline_flag(self, sample_content):
        """Test the navbar headline has its own element flag."""
        sample_content.visibility = {"navbar_headline": False}

        navbar = sample_content.section_visibility("navbar")

        assert navbar == {"navbar": None, "navbar_headline": False}

    def test_master_flags(self):
        """Test each section has a master flag among the known flags."""
        assert MASTER_FLAGS["hero"] == "hero_section"
        assert MASTER_FLAGS["navbar"] == "navbar"
        assert set(MASTER_FLAGS.values()) <= set(VISIBILITY_FLAGS)

    def test_nested_models(self):
        """Test nested model defaults."""
        assert Contact().email == ""
        assert Product(title="X").image is None


class TestStyleSelection:
    """Tests for StyleSelection model."""

    def test_defaults(self):
        """Test every section defaults to style 1."""
        styles = StyleSelection()

        for kind in SECTION_ORDER:
            assert styles.style_for(kind) == "1"
        assert styles.color_scheme == "default"
        assert styles.font_pairing is None

    def test_style_for_accepts_strings(self):
        """Test lookup by kind value."""
        styles = StyleSelection(hero="3")

        assert styles.style_for("hero") == "3"
        assert styles.style_for(SectionKind.HERO) == "3"

    def test_section_order(self):
        """Test fixed composition order."""
        assert [kind.value for kind in SECTION_ORDER] == [
            "navbar",
            "hero",
            "about",
            "services",
            "featured",
            "footer",
        ]
