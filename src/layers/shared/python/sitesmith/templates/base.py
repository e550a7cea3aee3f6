"""Base types for section generators.

A generator is a plain function taking SectionProps and returning a
self-contained HTML fragment (markup, scoped style and an optional inline
script). Each section module keeps a dict of StyleSpec entries keyed by
style id, filled by the decorator returned from ``style_registrar``.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from sitesmith.models.content import ContentRecord
from sitesmith.models.style import SectionKind


@dataclass
class SectionProps:
    """Inputs for a section generator.

    Attributes:
        content: The business profile.
        visibility: Visibility flags for this section only.
        photos: Displayable image URLs, already resolved and ordered.
        year: Copyright year for footers.
    """

    content: ContentRecord
    visibility: dict[str, bool | None] = field(default_factory=dict)
    photos: list[str] = field(default_factory=list)
    year: int | None = None


Generator = Callable[[SectionProps], str]


@dataclass(frozen=True)
class StyleSpec:
    """A registered style variant.

    Attributes:
        kind: Section kind.
        style_id: Style id string.
        name: Human-readable variant name.
        generator: Function rendering the fragment.
        uses: Editor fields this variant consumes.
    """

    kind: SectionKind
    style_id: str
    name: str
    generator: Generator
    uses: frozenset[str]


def style_registrar(
    kind: SectionKind,
    table: dict[str, StyleSpec],
) -> Callable[..., Callable[[Generator], Generator]]:
    """Build a decorator that registers generators into a style table.

    Args:
        kind: Section kind of the table.
        table: Style table to fill.

    Returns:
        Decorator factory taking (style_id, name, uses).
    """

    def register(
        style_id: str,
        name: str,
        uses: Iterable[str] = (),
    ) -> Callable[[Generator], Generator]:
        def decorator(func: Generator) -> Generator:
            if style_id in table:
                raise ValueError(f"Duplicate {kind.value} style id: {style_id}")
            table[style_id] = StyleSpec(
                kind=kind,
                style_id=style_id,
                name=name,
                generator=func,
                uses=frozenset(uses),
            )
            return func

        return decorator

    return register
