"""Content record repository for DynamoDB operations."""

import structlog

from sitesmith.models.content import ContentRecord
from sitesmith.repositories.base import BaseRepository
from sitesmith.utils.exceptions import ConflictError

logger = structlog.get_logger()


class ContentRepository(BaseRepository[ContentRecord]):
    """Repository for content records, one per submission.

    Doubles as the editor's persistence collaborator through save().
    """

    def __init__(self, table_name: str | None = None):
        """Initialize content repository."""
        super().__init__(ContentRecord, table_name)

    def get_by_submission(self, submission_id: str) -> ContentRecord | None:
        """Get the content record of a submission.

        Args:
            submission_id: The submission ID.

        Returns:
            The content record, or None if not found.
        """
        return self.get(pk=f"SUBMISSION#{submission_id}", sk="CONTENT")

    def get_by_submission_or_raise(self, submission_id: str) -> ContentRecord:
        """Get the content record of a submission or raise NotFoundError."""
        return self.get_or_raise(
            pk=f"SUBMISSION#{submission_id}",
            sk="CONTENT",
            resource_type="ContentRecord",
        )

    def save(self, record: ContentRecord) -> bool:
        """Create or update a content record.

        A record not yet stored is created; otherwise it is updated with a
        version check.

        Args:
            record: Record to store. Its version and timestamp are advanced
                on update.

        Returns:
            True on success, False if the write lost an optimistic-locking race.
        """
        try:
            if self.get_by_submission(record.submission_id) is None:
                self.create(record)
            else:
                self.update(record)
        except ConflictError as e:
            logger.warning(
                "Content save conflict",
                submission_id=record.submission_id,
                error=e.message,
            )
            return False

        logger.info(
            "Content saved",
            submission_id=record.submission_id,
            version=record.version,
        )
        return True

    def delete_by_submission(self, submission_id: str) -> bool:
        """Delete the content record of a submission."""
        return self.delete(pk=f"SUBMISSION#{submission_id}", sk="CONTENT")
