"""Unit of work port for the application layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, TypeVar

from pos.domain.catalog import CategoryRepository
from pos.domain.purchasing import ProviderRepository
from pos.domain.storage import BlobStorage
from pos.domain.user import UserRepository

UnitOfWorkT = TypeVar("UnitOfWorkT", bound="UnitOfWork")


class UnitOfWork(ABC):
    """One consistency boundary spanning every repository and the blob store.

    Use as ``async with unit_of_work:``. All repositories handed out share a
    single database session, so their writes see each other before commit
    and are committed together by :meth:`save_changes`.
    """

    @property
    @abstractmethod
    def user(self) -> UserRepository:
        """Get user repository."""

    @property
    @abstractmethod
    def category(self) -> CategoryRepository:
        """Get category repository."""

    @property
    @abstractmethod
    def provider(self) -> ProviderRepository:
        """Get provider repository."""

    @property
    @abstractmethod
    def storage(self) -> BlobStorage:
        """Get blob storage."""

    @abstractmethod
    async def save_changes(self) -> None:
        """Commit every pending change atomically."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every pending change."""

    @abstractmethod
    async def __aenter__(self: UnitOfWorkT) -> UnitOfWorkT: ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None: ...
