"""Pydantic models for Sitesmith entities."""

from sitesmith.models.base import BaseModel, TimestampMixin
from sitesmith.models.content import (
    MASTER_FLAGS,
    SECTION_VISIBILITY_FLAGS,
    VISIBILITY_FLAGS,
    CollectionItem,
    Contact,
    ContentRecord,
    Cta,
    FooterInfo,
    Methodology,
    MethodologyStep,
    NavLink,
    OfferSection,
    Product,
    ServiceItem,
    SocialLink,
    Testimonial,
)
from sitesmith.models.style import DEFAULT_STYLE_ID, SECTION_ORDER, SectionKind, StyleSelection

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "MASTER_FLAGS",
    "SECTION_VISIBILITY_FLAGS",
    "VISIBILITY_FLAGS",
    "CollectionItem",
    "Contact",
    "ContentRecord",
    "Cta",
    "FooterInfo",
    "Methodology",
    "MethodologyStep",
    "NavLink",
    "OfferSection",
    "Product",
    "ServiceItem",
    "SocialLink",
    "Testimonial",
    "DEFAULT_STYLE_ID",
    "SECTION_ORDER",
    "SectionKind",
    "StyleSelection",
]
