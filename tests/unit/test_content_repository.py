"""Tests for the content repository."""

import pytest

from sitesmith.models.content import Contact
from sitesmith.repositories.content import ContentRepository
from sitesmith.utils.exceptions import ConflictError, NotFoundError


class TestContentRepository:
    """Tests for ContentRepository."""

    def test_save_creates(self, dynamodb_table, sample_content):
        """Test first save creates the record."""
        repo = ContentRepository()

        assert repo.save(sample_content) is True

        stored = repo.get_by_submission("sub-456")
        assert stored.business_name == "Acme Builders"
        assert stored.version == 1

    def test_save_updates_with_version(self, dynamodb_table, sample_content):
        """Test later saves bump the version."""
        repo = ContentRepository()
        repo.save(sample_content)

        sample_content.contact = Contact(email="hi@acme.example")
        assert repo.save(sample_content) is True

        stored = repo.get_by_submission("sub-456")
        assert stored.version == 2
        assert stored.contact.email == "hi@acme.example"

    def test_stale_save_conflicts(self, dynamodb_table, sample_content):
        """Test a save from a stale copy is rejected."""
        repo = ContentRepository()
        repo.save(sample_content)
        stale = sample_content.model_copy(deep=True)
        repo.save(sample_content)

        stale.tagline = "Stale edit"
        assert repo.save(stale) is False
        assert stale.version == 1
        assert repo.get_by_submission("sub-456").tagline == "Quality homes since 1990"

    def test_update_conflict_raises(self, dynamodb_table, sample_content):
        """Test update on a stale version raises ConflictError."""
        repo = ContentRepository()
        repo.create(sample_content)
        stale = sample_content.model_copy(deep=True)
        repo.update(sample_content)

        with pytest.raises(ConflictError):
            repo.update(stale)

    def test_get_missing(self, dynamodb_table):
        """Test missing records."""
        repo = ContentRepository()

        assert repo.get_by_submission("nope") is None
        with pytest.raises(NotFoundError):
            repo.get_by_submission_or_raise("nope")

    def test_delete(self, dynamodb_table, sample_content):
        """Test deletion."""
        repo = ContentRepository()
        repo.save(sample_content)

        assert repo.delete_by_submission("sub-456") is True
        assert repo.delete_by_submission("sub-456") is False
