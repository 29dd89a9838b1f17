"""Blob storage port.

Every save produces a fresh key of the form ``<container>/<uuid><ext>``, so
a reference is owned by exactly one record and can be deleted without
affecting anyone else.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import PurePosixPath
from uuid import uuid4

# Extensions outside this shape are dropped from generated keys
SUFFIX_PATTERN = re.compile(r"\.[a-z0-9]{1,10}")


class StorageContainer(str, Enum):
    """Logical containers (buckets / folders) for uploaded files."""

    USERS = "users"
    PRODUCTS = "products"


def new_object_key(container: str, filename: str | None = None) -> str:
    """Build a unique key, keeping a short alphanumeric extension of ``filename``."""
    if isinstance(container, Enum):
        container = container.value
    suffix = PurePosixPath(filename).suffix.lower() if filename else ""
    if not SUFFIX_PATTERN.fullmatch(suffix):
        suffix = ""
    return f"{container}/{uuid4().hex}{suffix}"


class BlobStorage(ABC):
    """Port for persisting binary payloads outside the database."""

    @abstractmethod
    async def save(
        self,
        container: str,
        content: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        """Store ``content`` and return an opaque reference to it.

        Raises StorageError when the backend rejects the write.
        """

    @abstractmethod
    async def delete(self, reference: str) -> None:
        """Remove the file behind ``reference``. Missing files are ignored."""
