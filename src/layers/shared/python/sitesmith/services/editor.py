"""Editor state controller.

Owns the draft copy of a content record, tracks whether it differs from the
last saved or loaded version, and orchestrates save, reset and image
uploads against external collaborators.
"""

import asyncio
import re
from enum import Enum
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from sitesmith.models.content import (
    GALLERY_IMAGE_FIELDS,
    NESTED_MODELS,
    SINGLE_IMAGE_FIELDS,
    VISIBILITY_FLAGS,
    CollectionItem,
    Contact,
    ContentRecord,
    FooterInfo,
    Methodology,
    MethodologyStep,
    OfferSection,
    Product,
    ServiceItem,
)
from sitesmith.models.style import SectionKind
from sitesmith.services.asset_resolver import DEFAULT_SCHEME, make_reference
from sitesmith.templates.common import is_visible
from sitesmith.templates.navbar import DEFAULT_NAV_LINKS
from sitesmith.templates.registry import get_style_fields
from sitesmith.templates.services import DEFAULT_SERVICES
from sitesmith.utils.exceptions import (
    ExternalServiceError,
    SitesmithError,
    UploadInProgressError,
    UploadRejectedError,
    ValidationError,
)

logger = structlog.get_logger()

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_UPLOAD_BYTES = 10 * 1024 * 1024

# Fields callers may not change through update_field.
PROTECTED_FIELDS = frozenset({"id", "submission_id", "version", "created_at", "updated_at"})

DEFAULT_METHODOLOGY_STEPS = (
    ("Discover", "Identify your needs and explore our curated offerings."),
    ("Apply", "Select the best options tailored for you."),
    ("Master", "Experience excellence and achieve your goals."),
)
DEFAULT_COLLECTION_TITLES = ("Technology", "Design Strategy", "Leadership", "Culture")
DEFAULT_OFFER_TITLE = "What We Offer"
DEFAULT_OFFER_DESCRIPTION = (
    "Intensive, outcome-driven programs designed for professionals. "
    "Limited seats available per season."
)
DEFAULT_COLLECTIONS_HEADING = "Curated Disciplines"


class EditorState(str, Enum):
    """Whether the draft differs from the last saved or loaded record."""

    CLEAN = "clean"
    DIRTY = "dirty"


class LogNotifier:
    """Notifier that reports user-facing messages through structlog."""

    def __init__(self):
        """Initialize the notifier."""
        self.logger = logger.bind(service="editor_notifier")

    def notify(self, level: str, message: str) -> None:
        """Report a message at the given level (info, success, warning, error)."""
        if level == "error":
            self.logger.error(message)
        elif level == "warning":
            self.logger.warning(message)
        else:
            self.logger.info(message, level=level)


async def _call(func: Any, *args: Any) -> Any:
    """Call a collaborator method that may be sync or async."""
    if asyncio.iscoroutinefunction(func):
        return await func(*args)
    return func(*args)


def apply_structural_defaults(record: ContentRecord) -> bool:
    """Back-fill missing structural blocks on a record in place.

    Args:
        record: Record to fill.

    Returns:
        True if any default was applied.
    """
    changed = False

    if record.methodology is None:
        record.methodology = Methodology(
            title=f"Why Choose {record.business_name}",
            steps=[
                MethodologyStep(title=title, description=description)
                for title, description in DEFAULT_METHODOLOGY_STEPS
            ],
        )
        changed = True

    if not record.collection_items:
        record.collection_items = [
            CollectionItem(title=title, subtitle="Track") for title in DEFAULT_COLLECTION_TITLES
        ]
        changed = True

    if record.footer is None:
        record.footer = FooterInfo(brand_blurb=record.about, social_links=[])
        changed = True

    if record.unique_selling_points is None:
        record.unique_selling_points = []
        changed = True

    if record.offer_section is None:
        record.offer_section = OfferSection(
            title=DEFAULT_OFFER_TITLE,
            description=DEFAULT_OFFER_DESCRIPTION,
        )
        record.collections_heading = DEFAULT_COLLECTIONS_HEADING
        changed = True

    if record.contact is None:
        record.contact = Contact()
        changed = True

    if record.visibility is None:
        record.visibility = {flag: True for flag in VISIBILITY_FLAGS}
        changed = True

    if not record.navbar_links:
        record.navbar_links = [link.model_copy() for link in DEFAULT_NAV_LINKS]
        changed = True

    return changed


class EditorController:
    """Stateful controller over a draft content record.

    Example usage:
        editor = EditorController(persistence=ContentRepository(), storage=S3AssetStorage())
        editor.load(record)
        editor.update_contact(email="hello@example.com")
        await editor.save()
    """

    def __init__(
        self,
        persistence: Any,
        storage: Any | None = None,
        notifier: Any | None = None,
        scheme: str = DEFAULT_SCHEME,
    ):
        """Initialize the controller.

        Args:
            persistence: Collaborator with save(record) returning success.
            storage: Collaborator with request_upload_target(content_type) and
                upload(target, data, content_type).
            notifier: Collaborator with notify(level, message).
            scheme: Scheme used for stored image references.
        """
        self.persistence = persistence
        self.storage = storage
        self.notifier = notifier or LogNotifier()
        self.scheme = scheme
        self.state = EditorState.CLEAN
        self._initial: ContentRecord | None = None
        self._draft: ContentRecord | None = None
        self._uploads_in_flight: set[str] = set()
        self._mutations = 0
        self.logger = logger.bind(service="editor")

    @property
    def draft(self) -> ContentRecord:
        """Get the draft record."""
        if self._draft is None:
            raise RuntimeError("No record loaded")
        return self._draft

    @property
    def is_dirty(self) -> bool:
        """Check whether the draft has unsaved changes."""
        return self.state == EditorState.DIRTY

    def load(self, record: ContentRecord) -> bool:
        """Load a record into the editor and back-fill structural defaults.

        Args:
            record: Record to edit. It is copied, never mutated.

        Returns:
            True if defaults were applied (the draft starts dirty).
        """
        self._initial = record.model_copy(deep=True)
        self._draft = record.model_copy(deep=True)
        self._uploads_in_flight.clear()

        changed = apply_structural_defaults(self._draft)
        self.state = EditorState.DIRTY if changed else EditorState.CLEAN

        self.logger.info(
            "Record loaded",
            submission_id=record.submission_id,
            defaults_applied=changed,
        )
        return changed

    def _mark_dirty(self) -> None:
        self._mutations += 1
        self.state = EditorState.DIRTY

    def _assign(self, field: str, value: Any) -> None:
        """Set a draft field with model validation."""
        if field in PROTECTED_FIELDS or field not in ContentRecord.model_fields:
            raise ValidationError(
                message=f"Field '{field}' cannot be edited",
                errors=[{"field": field, "message": "Not an editable field"}],
            )
        try:
            setattr(self.draft, field, value)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)
        self._mark_dirty()

    def update_field(self, field: str, value: Any) -> None:
        """Replace a top-level field of the draft."""
        self._assign(field, value)

    def update_nested(self, field: str, **changes: Any) -> None:
        """Shallow-merge changes into a nested object field.

        Sibling keys of the nested object are kept. A missing object is
        created from its defaults first.
        """
        model = NESTED_MODELS.get(field)
        if model is None:
            raise ValidationError(
                message=f"Field '{field}' is not a nested object",
                errors=[{"field": field, "message": "Not a nested object"}],
            )
        current = getattr(self.draft, field)
        base = current.model_dump() if current is not None else {}
        try:
            merged = model.model_validate({**base, **changes})
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)
        self._assign(field, merged)

    def update_contact(self, **changes: str) -> None:
        """Update contact fields without dropping the others."""
        self.update_nested("contact", **changes)

    def update_service(self, index: int, **changes: str) -> None:
        """Shallow-merge changes into one service.

        Editing while the list is unset starts from the default services.
        """
        services = list(self.draft.services if self.draft.services is not None else DEFAULT_SERVICES)
        if not 0 <= index < len(services):
            raise ValidationError(
                message=f"No service at index {index}",
                errors=[{"field": f"services.{index}", "message": "Index out of range"}],
            )
        try:
            services[index] = ServiceItem.model_validate({**services[index].model_dump(), **changes})
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)
        self._assign("services", services)

    def update_product(self, index: int, **changes: Any) -> None:
        """Shallow-merge changes into one featured product."""
        products = list(self.draft.featured_products or [])
        if not 0 <= index < len(products):
            raise ValidationError(
                message=f"No product at index {index}",
                errors=[{"field": f"featured_products.{index}", "message": "Index out of range"}],
            )
        try:
            products[index] = Product.model_validate({**products[index].model_dump(), **changes})
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)
        self._assign("featured_products", products)

    def toggle_visibility(self, flag: str) -> bool:
        """Flip a visibility flag.

        The current value is read with the undefined-means-visible rule.

        Returns:
            The new value of the flag.
        """
        if flag not in VISIBILITY_FLAGS:
            raise ValidationError(
                message=f"Unknown visibility flag '{flag}'",
                errors=[{"field": "visibility", "message": f"Unknown flag {flag}"}],
            )
        new_value = not is_visible(self.draft.visibility, flag)
        self._assign("visibility", {**(self.draft.visibility or {}), flag: new_value})
        return new_value

    def set_images(self, field: str, refs: list[str]) -> None:
        """Replace a gallery field with an explicit list of references."""
        if field not in GALLERY_IMAGE_FIELDS:
            raise ValidationError(
                message=f"Field '{field}' is not an image gallery",
                errors=[{"field": field, "message": "Not an image gallery"}],
            )
        self._assign(field, list(refs))

    def style_fields(self, kind: SectionKind | str, style_id: str | None) -> frozenset[str]:
        """Get the editor fields used by a section style, to hide unused controls."""
        return get_style_fields(kind, style_id)

    def validate(self) -> list[dict]:
        """Check the draft before saving.

        Returns:
            A list of field errors, empty when the draft is valid.
        """
        errors = []
        contact = self.draft.contact
        if contact and contact.email and not EMAIL_RE.match(contact.email):
            errors.append({"field": "contact.email", "message": "Please enter a valid email address"})
        return errors

    async def save(self) -> None:
        """Persist the draft.

        Raises:
            ValidationError: If the draft is invalid. Persistence is not called.
            ExternalServiceError: If persistence fails. The draft is untouched.
        """
        errors = self.validate()
        if errors:
            self.notifier.notify("error", errors[0]["message"])
            raise ValidationError(message="Validation failed", errors=errors)

        snapshot = self.draft.model_copy(deep=True)
        mutations = self._mutations
        try:
            result = await _call(self.persistence.save, snapshot)
        except Exception as e:
            self.logger.error("Save failed", error=str(e), submission_id=snapshot.submission_id)
            self.notifier.notify("error", "Failed to save changes")
            raise ExternalServiceError("persistence", original_error=str(e)) from e

        if result is False:
            self.logger.warning("Save rejected", submission_id=snapshot.submission_id)
            self.notifier.notify("error", "Failed to save changes")
            raise ExternalServiceError("persistence", message="Save was rejected")

        # Persistence may advance the version for optimistic locking.
        self.draft.version = snapshot.version
        self.draft.updated_at = snapshot.updated_at
        self._initial = snapshot
        # Edits made while the save was in flight are still unsaved.
        if self._mutations == mutations:
            self.state = EditorState.CLEAN
        self.notifier.notify("success", "Changes saved successfully!")
        self.logger.info("Record saved", submission_id=snapshot.submission_id)

    def reset(self) -> None:
        """Discard the draft and restore the last loaded or saved record."""
        if self._initial is None:
            return
        self._draft = self._initial.model_copy(deep=True)
        self.state = EditorState.CLEAN
        self.notifier.notify("info", "Changes reset")

    def _check_upload(self, field: str, data: bytes, content_type: str) -> None:
        if field not in SINGLE_IMAGE_FIELDS and field not in GALLERY_IMAGE_FIELDS:
            raise UploadRejectedError(f"Field '{field}' does not hold images", field=field)
        if not content_type or not content_type.lower().startswith("image/"):
            raise UploadRejectedError("Only image files can be uploaded", field=field)
        if not data:
            raise UploadRejectedError("File is empty", field=field)
        if len(data) > MAX_UPLOAD_BYTES:
            raise UploadRejectedError("File is too large (max 10 MB)", field=field)

    async def upload_image(self, field: str, data: bytes, content_type: str) -> str | None:
        """Upload an image and store its reference in a field.

        Single-image fields have their value replaced; gallery fields get the
        new reference appended.

        Args:
            field: Target image field.
            data: File bytes.
            content_type: MIME type of the file.

        Returns:
            The stored reference, or None if the file was rejected or the
            upload failed.

        Raises:
            UploadInProgressError: If this field already has an upload in flight.
        """
        if field in self._uploads_in_flight:
            raise UploadInProgressError(field)
        if self.storage is None:
            raise RuntimeError("No storage collaborator configured")

        self._uploads_in_flight.add(field)
        try:
            self._check_upload(field, data, content_type)
            target = await _call(self.storage.request_upload_target, content_type)
            storage_id = await _call(self.storage.upload, target, data, content_type)
        except SitesmithError as e:
            self.logger.warning("Upload failed", field=field, error=e.message)
            self.notifier.notify("error", e.message)
            return None
        finally:
            self._uploads_in_flight.discard(field)

        reference = make_reference(storage_id, self.scheme)
        if field in SINGLE_IMAGE_FIELDS:
            self._assign(field, reference)
        else:
            current = getattr(self.draft, field) or []
            self._assign(field, [*current, reference])

        self.notifier.notify("success", "Image uploaded")
        self.logger.info("Image uploaded", field=field, reference=reference)
        return reference
