"""Repository classes for DynamoDB data access."""

from sitesmith.repositories.base import BaseRepository
from sitesmith.repositories.content import ContentRepository

__all__ = [
    "BaseRepository",
    "ContentRepository",
]
