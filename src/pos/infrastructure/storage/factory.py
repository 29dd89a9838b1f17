"""Build the configured blob storage backend."""

from pos.domain.storage import BlobStorage
from pos.infrastructure.storage.filesystem_storage import FilesystemBlobStorage
from pos.infrastructure.storage.s3_storage import S3BlobStorage
from pos_config import Settings


def create_blob_storage(settings: Settings) -> BlobStorage:
    if settings.storage_backend == "s3":
        secret = settings.s3_secret_access_key
        return S3BlobStorage(
            bucket_name=settings.s3_bucket_name,
            region=settings.s3_region,
            endpoint_url=settings.s3_endpoint_url,
            access_key_id=settings.s3_access_key_id,
            secret_access_key=secret.get_secret_value() if secret else None,
        )
    return FilesystemBlobStorage(settings.storage_root)
