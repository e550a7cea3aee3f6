"""Utility functions and helpers."""

from sitesmith.utils.exceptions import (
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    SitesmithError,
    UploadInProgressError,
    UploadRejectedError,
    ValidationError,
)

__all__ = [
    "ConflictError",
    "ExternalServiceError",
    "NotFoundError",
    "SitesmithError",
    "UploadInProgressError",
    "UploadRejectedError",
    "ValidationError",
]
