"""Storage domain: the blob store port."""

from pos.domain.storage.blob_storage import BlobStorage, StorageContainer, new_object_key
from pos.domain.storage.exceptions import StorageError

__all__ = ["BlobStorage", "StorageContainer", "StorageError", "new_object_key"]
