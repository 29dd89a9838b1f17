"""Blob storage exceptions."""

from typing import Any

from pos.domain.shared.exceptions import DomainException, ErrorCode


class StorageError(DomainException):
    """Raised when a file cannot be stored or removed."""

    def __init__(
        self,
        message: str = "File storage operation failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.STORAGE_FAILED, details)
