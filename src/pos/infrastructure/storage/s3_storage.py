"""S3-compatible blob storage.

Supports AWS S3 and S3-compatible services like MinIO. boto3 is blocking,
so every call runs in a worker thread.
"""

import asyncio
import logging
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from pos.domain.storage import BlobStorage, StorageError, new_object_key

logger = logging.getLogger(__name__)


class S3BlobStorage(BlobStorage):
    """Stores blobs as objects of one bucket, keyed ``<container>/<uuid><ext>``.

    Parameters
    ----------
    bucket_name
        Target bucket; it must already exist
    client
        A boto3 S3 client. When omitted one is built from the keyword
        arguments on first use.
    """

    def __init__(  # noqa: PLR0913
        self,
        bucket_name: str,
        client: Any = None,
        region: str | None = None,
        endpoint_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
    ):
        self._bucket_name = bucket_name
        self._client = client
        self._region = region
        self._endpoint_url = endpoint_url
        self._access_key_id = access_key_id
        self._secret_access_key = secret_access_key

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    def _get_client(self) -> Any:
        """Get or create boto3 S3 client."""
        if self._client is None:
            config: dict[str, Any] = {
                "service_name": "s3",
                "region_name": self._region,
            }

            # Endpoint URL for MinIO or non-AWS S3, which needs path-style
            if self._endpoint_url:
                config["endpoint_url"] = self._endpoint_url
                config["config"] = Config(
                    signature_version="s3v4",
                    s3={"addressing_style": "path"},
                )

            if self._access_key_id and self._secret_access_key:
                config["aws_access_key_id"] = self._access_key_id
                config["aws_secret_access_key"] = self._secret_access_key

            self._client = boto3.client(**config)

        return self._client

    async def save(
        self,
        container: str,
        content: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        key = new_object_key(container, filename)
        params: dict[str, Any] = {
            "Bucket": self._bucket_name,
            "Key": key,
            "Body": content,
        }
        if content_type:
            params["ContentType"] = content_type

        try:
            await asyncio.to_thread(self._get_client().put_object, **params)
        except (BotoCoreError, ClientError) as e:
            logger.error("S3 upload failed for %s: %s", key, e)
            msg = "Failed to store file in S3"
            raise StorageError(
                msg,
                details={"bucket": self._bucket_name, "key": key},
            ) from e

        logger.info("Stored s3://%s/%s (%d bytes)", self._bucket_name, key, len(content))
        return key

    async def delete(self, reference: str) -> None:
        # S3 DeleteObject succeeds for missing keys
        try:
            await asyncio.to_thread(
                self._get_client().delete_object,
                Bucket=self._bucket_name,
                Key=reference,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("S3 delete failed for %s: %s", reference, e)
            msg = "Failed to delete file from S3"
            raise StorageError(
                msg,
                details={"bucket": self._bucket_name, "key": reference},
            ) from e

        logger.debug("Deleted s3://%s/%s", self._bucket_name, reference)
