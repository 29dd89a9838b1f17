"""Blob storage backends."""

from pos.infrastructure.storage.factory import create_blob_storage
from pos.infrastructure.storage.filesystem_storage import FilesystemBlobStorage
from pos.infrastructure.storage.s3_storage import S3BlobStorage

__all__ = ["FilesystemBlobStorage", "S3BlobStorage", "create_blob_storage"]
