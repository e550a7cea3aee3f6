"""Tests for the exception hierarchy."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from sitesmith.models.content import ServiceItem
from sitesmith.utils.exceptions import (
    ExternalServiceError,
    NotFoundError,
    UploadRejectedError,
    ValidationError,
)


class TestValidationError:
    """Tests for ValidationError."""

    def test_from_pydantic(self):
        """Test pydantic errors become field errors with a readable message."""
        with pytest.raises(PydanticValidationError) as exc_info:
            ServiceItem.model_validate({"description": "No name"})

        error = ValidationError.from_pydantic(exc_info.value)

        assert error.errors[0]["field"] == "name"
        assert error.errors[0]["type"] == "missing"
        assert error.message.startswith("name: ")
        assert error.to_dict()["code"] == "VALIDATION_ERROR"

    def test_defaults(self):
        """Test a bare error has no field errors."""
        error = ValidationError()

        assert error.message == "Validation failed"
        assert error.errors == []


class TestSitesmithErrors:
    """Tests for the remaining error types."""

    def test_not_found(self):
        """Test not-found errors keep the lookup key."""
        error = NotFoundError("ContentRecord", "sub-1")

        assert error.resource_id == "sub-1"
        assert error.to_dict() == {
            "code": "NOT_FOUND",
            "message": "ContentRecord 'sub-1' does not exist",
            "details": {"resource_type": "ContentRecord", "resource_id": "sub-1"},
        }

    def test_external_service(self):
        """Test the underlying error is kept in details only."""
        error = ExternalServiceError("s3", original_error="timeout")

        assert error.service == "s3"
        assert error.message == "The s3 service failed"
        assert error.details["original_error"] == "timeout"

    def test_upload_rejected_without_field(self):
        """Test details stay empty when no field is given."""
        error = UploadRejectedError("File is empty")

        assert error.field is None
        assert "details" not in error.to_dict()
