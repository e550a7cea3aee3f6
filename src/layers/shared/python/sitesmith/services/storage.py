"""S3-backed asset storage.

Uploads go straight to S3 through presigned PUT URLs; stored objects are
exposed to the page as presigned GET URLs.
"""

import os
from dataclasses import dataclass
from typing import Any

import boto3
import httpx
import structlog
from botocore.exceptions import ClientError

from sitesmith.models.base import generate_ulid
from sitesmith.utils.exceptions import ExternalServiceError

logger = structlog.get_logger()

DEFAULT_PREFIX = "uploads/"


@dataclass
class UploadTarget:
    """Where a single upload should be sent."""

    url: str
    storage_id: str
    key: str
    content_type: str | None = None


def _url_expiry() -> int:
    return int(os.environ.get("ASSET_URL_EXPIRY", "3600"))


class S3AssetStorage:
    """Asset storage on an S3 bucket.

    Implements both the upload side used by the editor and the
    resolve_many lookup used by the asset resolver.
    """

    def __init__(
        self,
        bucket: str | None = None,
        prefix: str = DEFAULT_PREFIX,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize storage.

        Args:
            bucket: Bucket name. Defaults to the ASSETS_BUCKET env var.
            prefix: Key prefix for uploaded objects.
            http_client: Client used for uploads. A short-lived client is
                created per upload when None.
        """
        self.bucket = bucket or os.environ.get("ASSETS_BUCKET", "sitesmith-assets-dev")
        self.prefix = prefix
        self.http_client = http_client
        self._s3 = None
        self.logger = logger.bind(service="asset_storage", bucket=self.bucket)

    @property
    def s3(self):
        """Get S3 client (lazy initialization)."""
        if self._s3 is None:
            self._s3 = boto3.client("s3")
        return self._s3

    def key_for(self, storage_id: str) -> str:
        """Get the object key for a storage id."""
        return f"{self.prefix}{storage_id}"

    def request_upload_target(self, content_type: str | None = None) -> UploadTarget:
        """Reserve a storage id and presign an upload URL for it.

        Args:
            content_type: MIME type the upload will be sent with.

        Returns:
            The upload target.

        Raises:
            ExternalServiceError: If presigning fails.
        """
        storage_id = generate_ulid()
        key = self.key_for(storage_id)

        params: dict[str, Any] = {"Bucket": self.bucket, "Key": key}
        if content_type:
            params["ContentType"] = content_type

        try:
            url = self.s3.generate_presigned_url(
                "put_object",
                Params=params,
                ExpiresIn=_url_expiry(),
            )
        except ClientError as e:
            self.logger.error("Failed to presign upload", error=str(e))
            raise ExternalServiceError("s3", original_error=str(e)) from e

        return UploadTarget(url=url, storage_id=storage_id, key=key, content_type=content_type)

    async def upload(self, target: UploadTarget, data: bytes, content_type: str) -> str:
        """Send file bytes to an upload target.

        Returns:
            The storage id of the uploaded object.

        Raises:
            ExternalServiceError: If the upload request fails.
        """
        headers = {"Content-Type": content_type}
        try:
            if self.http_client is not None:
                response = await self.http_client.put(target.url, content=data, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=60.0) as client:
                    response = await client.put(target.url, content=data, headers=headers)
        except httpx.TimeoutException as e:
            raise ExternalServiceError("s3", message="Upload timed out") from e
        except httpx.HTTPError as e:
            raise ExternalServiceError("s3", original_error=str(e)) from e

        if not response.is_success:
            self.logger.warning(
                "Upload rejected by storage",
                status_code=response.status_code,
                key=target.key,
            )
            raise ExternalServiceError(
                "s3",
                message=f"Upload failed with status {response.status_code}",
            )

        self.logger.info("Asset uploaded", key=target.key, size=len(data))
        return target.storage_id

    def resolve_many(self, storage_ids: list[str]) -> list[str | None]:
        """Get display URLs for stored objects.

        Args:
            storage_ids: Storage ids to resolve.

        Returns:
            URLs in input order, None for ids with no stored object.
        """
        urls: list[str | None] = []
        for storage_id in storage_ids:
            key = self.key_for(storage_id)
            try:
                self.s3.head_object(Bucket=self.bucket, Key=key)
            except ClientError as e:
                if e.response["Error"]["Code"] in ("404", "NoSuchKey", "NotFound"):
                    urls.append(None)
                    continue
                self.logger.error("Failed to look up asset", error=str(e), key=key)
                raise ExternalServiceError("s3", original_error=str(e)) from e

            urls.append(
                self.s3.generate_presigned_url(
                    "get_object",
                    Params={"Bucket": self.bucket, "Key": key},
                    ExpiresIn=_url_expiry(),
                )
            )
        return urls

    def delete(self, storage_id: str) -> None:
        """Delete a stored object."""
        self.s3.delete_object(Bucket=self.bucket, Key=self.key_for(storage_id))
        self.logger.debug("Asset deleted", storage_id=storage_id)


def get_asset_storage() -> S3AssetStorage:
    """Get asset storage instance.

    Returns:
        S3AssetStorage instance.
    """
    return S3AssetStorage()
