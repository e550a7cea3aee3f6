"""Exception hierarchy for Sitesmith.

Every error carries a short machine-readable code and a message that is
safe to show to the person editing the site.
"""


class SitesmithError(Exception):
    """Base exception for all Sitesmith errors."""

    code = "SITESMITH_ERROR"

    def __init__(self, message: str, details: dict | None = None):
        """Initialize SitesmithError.

        Args:
            message: Message suitable for an editor notification.
            details: Structured context for logs.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        """Describe the error for notifications and structured logs."""
        result = {"code": self.code, "message": self.message}
        if self.details:
            result["details"] = self.details
        return result


class NotFoundError(SitesmithError):
    """A stored record does not exist."""

    code = "NOT_FOUND"

    def __init__(self, resource_type: str, resource_id: str):
        """Initialize NotFoundError.

        Args:
            resource_type: Kind of record, e.g. "ContentRecord".
            resource_id: Key the lookup used.
        """
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' does not exist",
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class ValidationError(SitesmithError):
    """A draft value or edit was refused.

    ``errors`` holds one ``{"field", "message"}`` entry per problem, with
    dotted paths for nested fields (``contact.email``).
    """

    code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Validation failed", errors: list[dict] | None = None):
        """Initialize ValidationError."""
        self.errors = errors or []
        super().__init__(message, details={"errors": self.errors})

    @classmethod
    def from_pydantic(cls, exc: Exception) -> "ValidationError":
        """Translate a pydantic ValidationError into field errors.

        The first problem becomes the message so that a notifier can show
        it directly.
        """
        errors = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "unknown"),
            }
            for error in exc.errors()
        ]
        if not errors:
            return cls()
        first = errors[0]
        message = f"{first['field']}: {first['message']}" if first["field"] else first["message"]
        return cls(message=message, errors=errors)


class ConflictError(SitesmithError):
    """A write lost an optimistic-lock race or hit an existing record."""

    code = "CONFLICT"


class ExternalServiceError(SitesmithError):
    """A collaborator (persistence, storage, lookup) failed."""

    code = "EXTERNAL_SERVICE_ERROR"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        original_error: str | None = None,
    ):
        """Initialize ExternalServiceError.

        Args:
            service: Collaborator name, e.g. "s3" or "persistence".
            message: Override for the default message.
            original_error: Text of the underlying exception, kept for logs.
        """
        self.service = service
        details = {"service": service}
        if original_error:
            details["original_error"] = original_error
        super().__init__(message or f"The {service} service failed", details=details)


class UploadInProgressError(SitesmithError):
    """A field already has an upload in flight."""

    code = "UPLOAD_IN_PROGRESS"

    def __init__(self, field: str):
        """Initialize UploadInProgressError."""
        self.field = field
        super().__init__(f"An upload for '{field}' is already in progress", details={"field": field})


class UploadRejectedError(SitesmithError):
    """A file failed the checks run before any transfer."""

    code = "UPLOAD_REJECTED"

    def __init__(self, message: str, field: str | None = None):
        """Initialize UploadRejectedError."""
        self.field = field
        super().__init__(message, details={"field": field} if field else None)
