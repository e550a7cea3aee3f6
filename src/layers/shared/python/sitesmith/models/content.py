"""Content record model.

A ContentRecord is the business profile that drives website generation.
Every field beyond the identity triple is optional; generators supply
documented defaults for anything left unset.
"""

from typing import ClassVar

from pydantic import BaseModel as PydanticBaseModel, Field, field_validator

from sitesmith.models.base import BaseModel


# Toggle-able elements, grouped by section. The first flag of each group is
# the section master toggle.
SECTION_VISIBILITY_FLAGS: dict[str, tuple[str, ...]] = {
    "navbar": ("navbar", "navbar_headline"),
    "hero": (
        "hero_section",
        "hero_headline",
        "hero_tagline",
        "hero_description",
        "hero_testimonial",
        "hero_button",
        "hero_image",
    ),
    "about": (
        "about_section",
        "about_badge",
        "about_headline",
        "about_description",
        "about_images",
    ),
    "services": (
        "services_section",
        "services_badge",
        "services_headline",
        "services_subheadline",
        "services_image",
        "services_list",
    ),
    "featured": (
        "featured_section",
        "featured_headline",
        "featured_subheadline",
        "featured_products",
    ),
    "footer": (
        "footer_section",
        "footer_badge",
        "footer_headline",
        "footer_description",
        "footer_contact",
        "footer_social",
    ),
}

VISIBILITY_FLAGS: tuple[str, ...] = tuple(
    flag for flags in SECTION_VISIBILITY_FLAGS.values() for flag in flags
)

MASTER_FLAGS: dict[str, str] = {
    kind: flags[0] for kind, flags in SECTION_VISIBILITY_FLAGS.items()
}


class NavLink(PydanticBaseModel):
    """A navbar link."""

    label: str
    href: str = "#"


class Cta(PydanticBaseModel):
    """Call-to-action button."""

    label: str = ""
    link: str = "#"


class Testimonial(PydanticBaseModel):
    """Customer testimonial."""

    quote: str
    author: str = ""
    role: str | None = None
    avatar: str | None = None


class ServiceItem(PydanticBaseModel):
    """A single offered service."""

    name: str
    description: str = ""


class Product(PydanticBaseModel):
    """A featured product or project."""

    title: str
    description: str = ""
    image: str | None = None
    tags: list[str] | None = None
    testimonial: Testimonial | None = None


class SocialLink(PydanticBaseModel):
    """Footer social network link."""

    platform: str
    url: str


class FooterInfo(PydanticBaseModel):
    """Footer copy and social links."""

    badge: str | None = None
    headline: str | None = None
    description: str | None = None
    brand_blurb: str | None = None
    social_links: list[SocialLink] = Field(default_factory=list)


class Contact(PydanticBaseModel):
    """Business contact details."""

    phone: str = ""
    email: str = ""
    address: str = ""


class MethodologyStep(PydanticBaseModel):
    """One step of the methodology block."""

    title: str
    subtitle: str = ""
    description: str = ""


class Methodology(PydanticBaseModel):
    """Methodology block shown by some templates."""

    title: str = ""
    description: str = ""
    steps: list[MethodologyStep] = Field(default_factory=list)


class CollectionItem(PydanticBaseModel):
    """An entry of the curated collections block."""

    title: str
    subtitle: str = ""


class OfferSection(PydanticBaseModel):
    """The "what we offer" block."""

    title: str = ""
    description: str = ""


class ContentRecord(BaseModel):
    """Business profile driving website generation."""

    _pk_prefix: ClassVar[str] = "SUBMISSION#"
    _sk_prefix: ClassVar[str] = "CONTENT"

    submission_id: str = Field(..., description="Owning submission ID")

    # Identity
    business_name: str = Field(..., min_length=1, max_length=100)
    tagline: str = Field(..., min_length=1, max_length=200)
    about: str = Field(..., min_length=1, max_length=800)

    # Navbar
    navbar_links: list[NavLink] | None = None
    navbar_headline: str | None = None
    navbar_cta: Cta | None = None

    # Hero
    hero_cta: Cta | None = None
    hero_badge_text: str | None = None
    hero_testimonial: Testimonial | None = None
    hero_images: list[str] | None = None

    # About
    about_headline: str | None = None
    about_description: str | None = None
    about_tagline: str | None = None
    about_tags: list[str] | None = None
    about_images: list[str] | None = None

    # Services
    services_badge: str | None = None
    services_headline: str | None = None
    services_subheadline: str | None = None
    services_image: str | None = None
    services: list[ServiceItem] | None = None

    # Featured
    featured_headline: str | None = None
    featured_subheadline: str | None = None
    featured_products: list[Product] | None = None
    featured_images: list[str] | None = None

    # Footer and contact
    footer: FooterInfo | None = None
    contact: Contact | None = None

    # Structural blocks back-filled by the editor
    methodology: Methodology | None = None
    collection_items: list[CollectionItem] | None = None
    collections_heading: str | None = None
    offer_section: OfferSection | None = None
    unique_selling_points: list[str] | None = None

    visibility: dict[str, bool] | None = None

    @field_validator("business_name", "tagline", "about")
    @classmethod
    def strip_identity(cls, v: str) -> str:
        """Reject identity fields that are only whitespace."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field must not be blank")
        return stripped

    @field_validator("visibility")
    @classmethod
    def validate_visibility_keys(cls, v: dict[str, bool] | None) -> dict[str, bool] | None:
        """Only known visibility flags may be stored."""
        if v is None:
            return v
        unknown = set(v) - set(VISIBILITY_FLAGS)
        if unknown:
            raise ValueError(f"Unknown visibility flags: {', '.join(sorted(unknown))}")
        return v

    def get_pk(self) -> str:
        """Get partition key: SUBMISSION#{submission_id}."""
        return f"SUBMISSION#{self.submission_id}"

    def get_sk(self) -> str:
        """Get sort key: CONTENT."""
        return "CONTENT"

    def section_visibility(self, kind: str) -> dict[str, bool | None]:
        """Get the visibility sub-map for one section kind.

        Flags absent from the record map to None, which reads as visible.
        """
        flags = self.visibility or {}
        return {flag: flags.get(flag) for flag in SECTION_VISIBILITY_FLAGS[kind]}


# Nested object fields and their model types, used for shallow merges.
NESTED_MODELS: dict[str, type[PydanticBaseModel]] = {
    "navbar_cta": Cta,
    "hero_cta": Cta,
    "hero_testimonial": Testimonial,
    "footer": FooterInfo,
    "contact": Contact,
    "methodology": Methodology,
    "offer_section": OfferSection,
}

# Image fields holding a single reference versus a gallery.
SINGLE_IMAGE_FIELDS: frozenset[str] = frozenset({"services_image"})
GALLERY_IMAGE_FIELDS: frozenset[str] = frozenset(
    {"hero_images", "about_images", "featured_images"}
)
