"""Section kinds and per-section style selection."""

from enum import Enum

from pydantic import BaseModel as PydanticBaseModel, ConfigDict, Field

DEFAULT_STYLE_ID = "1"


class SectionKind(str, Enum):
    """Section kinds a site is composed of."""

    NAVBAR = "navbar"
    HERO = "hero"
    ABOUT = "about"
    SERVICES = "services"
    FEATURED = "featured"
    FOOTER = "footer"


# Fixed composition order.
SECTION_ORDER: tuple[SectionKind, ...] = (
    SectionKind.NAVBAR,
    SectionKind.HERO,
    SectionKind.ABOUT,
    SectionKind.SERVICES,
    SectionKind.FEATURED,
    SectionKind.FOOTER,
)


class StyleSelection(PydanticBaseModel):
    """Chosen style variant per section kind plus theme settings.

    A style id of None disables the section entirely.
    """

    model_config = ConfigDict(validate_assignment=True)

    navbar: str | None = DEFAULT_STYLE_ID
    hero: str | None = DEFAULT_STYLE_ID
    about: str | None = DEFAULT_STYLE_ID
    services: str | None = DEFAULT_STYLE_ID
    featured: str | None = DEFAULT_STYLE_ID
    footer: str | None = DEFAULT_STYLE_ID

    color_scheme: str = Field(default="default", description="Color scheme id")
    font_pairing: str | None = Field(default=None, description="Font pairing id")

    def style_for(self, kind: SectionKind | str) -> str | None:
        """Get the configured style id for a section kind."""
        return getattr(self, SectionKind(kind).value)
