"""Preview synchronization.

Keeps a preview surface in step with the editor: the document is rebuilt
through the composer on every change and the field being edited is
outlined with a highlight.
"""

import hashlib
from collections.abc import Callable, Sequence

import structlog
from bs4 import BeautifulSoup

from sitesmith.models.content import ContentRecord
from sitesmith.models.style import StyleSelection
from sitesmith.services.composer import compose
from sitesmith.templates.contract import selector_for

logger = structlog.get_logger()

HIGHLIGHT_CLASS = "editor-highlight"
HIGHLIGHT_STYLE_ID = "editor-highlight-styles"
HIGHLIGHT_CSS = (
    f".{HIGHLIGHT_CLASS} {{"
    " outline: 3px solid #3B82F6 !important;"
    " outline-offset: 4px;"
    " background-color: rgba(59, 130, 246, 0.1) !important;"
    " position: relative;"
    " transition: outline 0.2s ease, background-color 0.2s ease;"
    " }"
    f" .{HIGHLIGHT_CLASS}::before {{"
    ' content: "\\270F\\FE0F  Editing";'
    " position: absolute; top: -28px; left: 0;"
    " background: #3B82F6; color: #fff;"
    " font-size: 12px; padding: 2px 8px; border-radius: 4px;"
    " z-index: 1000;"
    " }"
)


class PreviewSurface:
    """In-memory preview document that supports highlighting.

    Holds the currently displayed markup as a parsed tree. Highlights are
    applied to the tree and never leak into composed output.
    """

    def __init__(self):
        """Initialize an empty surface."""
        self._soup = BeautifulSoup("", "html.parser")
        self._highlighted = []

    def load(self, html: str) -> None:
        """Replace the whole document."""
        self._soup = BeautifulSoup(html, "html.parser")
        self._highlighted = []

    def html(self) -> str:
        """Serialize the current document."""
        return str(self._soup)

    def _ensure_highlight_styles(self) -> None:
        if self._soup.find(id=HIGHLIGHT_STYLE_ID) is not None:
            return
        style = self._soup.new_tag("style", id=HIGHLIGHT_STYLE_ID)
        style.string = HIGHLIGHT_CSS
        container = self._soup.find("head") or self._soup.find("body") or self._soup
        container.append(style)

    def highlight(self, selector: str, text: str | None = None) -> int:
        """Outline every element matching a selector.

        Any previous highlight is cleared first, so at most one batch of
        elements is highlighted at a time.

        Args:
            selector: CSS selector of the elements to outline.
            text: Optional text that matched elements must contain.

        Returns:
            Number of highlighted elements.
        """
        self.clear_highlight()
        elements = self._soup.select(selector)
        if text:
            elements = [el for el in elements if text in el.get_text()]
        if not elements:
            return 0

        self._ensure_highlight_styles()
        for el in elements:
            classes = el.get("class") or []
            if HIGHLIGHT_CLASS not in classes:
                el["class"] = [*classes, HIGHLIGHT_CLASS]
        self._highlighted = elements
        return len(elements)

    def clear_highlight(self) -> None:
        """Remove the highlight class and the injected highlight styles."""
        for el in self._soup.find_all(class_=HIGHLIGHT_CLASS):
            classes = [c for c in el.get("class", []) if c != HIGHLIGHT_CLASS]
            if classes:
                el["class"] = classes
            else:
                del el["class"]
        for style in self._soup.find_all(id=HIGHLIGHT_STYLE_ID):
            style.decompose()
        self._highlighted = []

    @property
    def highlighted_count(self) -> int:
        """Get the number of elements currently highlighted."""
        return len(self._highlighted)


class PreviewSync:
    """Recompose the preview on edits and track the focused field.

    Example usage:
        sync = PreviewSync(PreviewSurface())
        sync.refresh(editor.draft, styles, photos)
        sync.focus("hero_headline")
    """

    def __init__(
        self,
        surface: PreviewSurface,
        composer_fn: Callable[..., str] = compose,
        base_document: str | None = None,
    ):
        """Initialize the sync.

        Args:
            surface: Preview surface to drive.
            composer_fn: Document composer, compose() by default.
            base_document: Base document passed to the composer.
        """
        self.surface = surface
        self.composer_fn = composer_fn
        self.base_document = base_document
        self.focused_field: str | None = None
        self._digest: str | None = None
        self.logger = logger.bind(service="preview_sync")

    def refresh(
        self,
        content: ContentRecord,
        styles: StyleSelection | None = None,
        photos: Sequence[str] | None = None,
        **compose_kwargs,
    ) -> bool:
        """Recompose the document and reload the surface if it changed.

        The focused field is highlighted again after a reload.

        Returns:
            True if the surface was reloaded.
        """
        html = self.composer_fn(self.base_document, content, styles, photos, **compose_kwargs)
        digest = hashlib.sha256(html.encode("utf-8")).hexdigest()
        if digest == self._digest:
            return False

        self.surface.load(html)
        self._digest = digest
        if self.focused_field:
            self._apply_focus()

        self.logger.debug("Preview reloaded", digest=digest[:12])
        return True

    def focus(self, field: str) -> int:
        """Highlight the elements that display a field.

        Returns:
            Number of highlighted elements; zero for unmapped fields.
        """
        self.focused_field = field
        return self._apply_focus()

    def blur(self) -> None:
        """Drop the focus and clear highlights."""
        self.focused_field = None
        self.surface.clear_highlight()

    def _apply_focus(self) -> int:
        selector = selector_for(self.focused_field) if self.focused_field else None
        if selector is None:
            self.surface.clear_highlight()
            return 0
        return self.surface.highlight(selector)
