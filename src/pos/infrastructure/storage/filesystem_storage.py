"""Local filesystem blob storage.

Useful for local development and tests; files live under a root directory
with one sub-directory per container.
"""

import asyncio
import logging
from pathlib import Path

from pos.domain.storage import BlobStorage, StorageError, new_object_key

logger = logging.getLogger(__name__)


class FilesystemBlobStorage(BlobStorage):
    def __init__(self, root: str | Path):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    async def save(
        self,
        container: str,
        content: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        key = new_object_key(container, filename)
        path = self._resolve(key)

        try:
            await asyncio.to_thread(self._write, path, content)
        except OSError as e:
            logger.error("Filesystem write failed for %s: %s", path, e)
            msg = f"Failed to store file {key}"
            raise StorageError(msg, details={"key": key}) from e

        logger.info("Stored %s (%d bytes)", key, len(content))
        return key

    async def delete(self, reference: str) -> None:
        path = self._resolve(reference)
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            msg = f"Failed to delete file {reference}"
            raise StorageError(msg, details={"key": reference}) from e
        logger.debug("Deleted %s", reference)

    def _resolve(self, key: str) -> Path:
        root = self._root.resolve()
        path = (root / key).resolve()
        if not path.is_relative_to(root):
            msg = f"Invalid storage reference: {key}"
            raise StorageError(msg, details={"key": key})
        return path

    @staticmethod
    def _write(path: Path, content: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
