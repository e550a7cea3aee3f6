"""Base repository class for DynamoDB operations."""

import os
from typing import Any, Generic, TypeVar

import boto3
import structlog
from botocore.exceptions import ClientError

from sitesmith.models.base import BaseModel
from sitesmith.utils.exceptions import ConflictError, NotFoundError

logger = structlog.get_logger()

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Base repository for DynamoDB single-table design.

    Provides CRUD operations with optimistic locking on the version field.
    """

    def __init__(
        self,
        model_class: type[T],
        table_name: str | None = None,
    ):
        """Initialize repository.

        Args:
            model_class: The Pydantic model class for this repository.
            table_name: DynamoDB table name. Defaults to TABLE_NAME env var.
        """
        self.model_class = model_class
        self.table_name = table_name or os.environ.get("TABLE_NAME", "sitesmith-dev")
        self._dynamodb = None
        self._table = None

    @property
    def dynamodb(self):
        """Get DynamoDB resource (lazy initialization)."""
        if self._dynamodb is None:
            self._dynamodb = boto3.resource("dynamodb")
        return self._dynamodb

    @property
    def table(self):
        """Get DynamoDB table (lazy initialization)."""
        if self._table is None:
            self._table = self.dynamodb.Table(self.table_name)
        return self._table

    def _build_key(self, pk: str, sk: str) -> dict[str, str]:
        return {"PK": pk, "SK": sk}

    def get(self, pk: str, sk: str) -> T | None:
        """Get an item by its primary key.

        Args:
            pk: Partition key value.
            sk: Sort key value.

        Returns:
            Model instance or None if not found.
        """
        try:
            response = self.table.get_item(Key=self._build_key(pk, sk))
        except ClientError as e:
            logger.error("DynamoDB get_item failed", error=str(e), pk=pk, sk=sk)
            raise

        item = response.get("Item")
        if not item:
            return None
        return self.model_class.from_dynamodb(item)

    def get_or_raise(self, pk: str, sk: str, resource_type: str) -> T:
        """Get an item or raise NotFoundError.

        Raises:
            NotFoundError: If item not found.
        """
        item = self.get(pk, sk)
        if not item:
            resource_id = pk.split("#", 1)[-1] if "#" in pk else pk
            raise NotFoundError(resource_type, resource_id)
        return item

    def _write(self, item: T, condition: str | None, values: dict | None, conflict_message: str) -> T:
        db_item = item.to_dynamodb()
        db_item.update(item.get_keys())

        kwargs: dict[str, Any] = {"Item": db_item}
        if condition:
            kwargs["ConditionExpression"] = condition
        if values:
            kwargs["ExpressionAttributeValues"] = values

        try:
            self.table.put_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ConflictError(conflict_message)
            logger.error("DynamoDB put_item failed", error=str(e), pk=db_item["PK"])
            raise

        logger.debug(
            "Item saved",
            pk=db_item["PK"],
            sk=db_item["SK"],
            version=item.version,
            model=self.model_class.__name__,
        )
        return item

    def put(self, item: T) -> T:
        """Put an item unconditionally."""
        item.update_timestamp()
        return self._write(item, None, None, "Item could not be written")

    def create(self, item: T) -> T:
        """Create a new item.

        Raises:
            ConflictError: If item already exists.
        """
        item.update_timestamp()
        return self._write(
            item,
            "attribute_not_exists(PK)",
            None,
            "Item already exists",
        )

    def update(self, item: T, check_version: bool = True) -> T:
        """Update an existing item with optimistic locking.

        The stored version must equal the item's version; the item is
        written with the version incremented. On conflict the item keeps its
        original version.

        Raises:
            ConflictError: If version mismatch (concurrent modification).
        """
        old_version = item.version
        item.increment_version()
        item.update_timestamp()

        try:
            if check_version:
                return self._write(
                    item,
                    "version = :old_version",
                    {":old_version": old_version},
                    "Item was modified by another process",
                )
            return self._write(item, None, None, "Item could not be written")
        except ConflictError:
            item.version = old_version
            raise

    def delete(self, pk: str, sk: str) -> bool:
        """Delete an item.

        Returns:
            True if deleted, False if not found.
        """
        try:
            self.table.delete_item(
                Key=self._build_key(pk, sk),
                ConditionExpression="attribute_exists(PK)",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                return False
            logger.error("DynamoDB delete_item failed", error=str(e))
            raise

        logger.debug("Item deleted", pk=pk, sk=sk)
        return True
