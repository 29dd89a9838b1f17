"""SQLAlchemy implementation of the UnitOfWork port."""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pos.application.ports import UnitOfWork
from pos.domain.storage import BlobStorage
from pos.infrastructure.persistence.sqlalchemy.repositories import (
    CategoryRepositorySQLAlchemy,
    ProviderRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Unit of work over one AsyncSession.

    The session is opened on ``__aenter__`` and always closed on
    ``__aexit__``. An exception inside the block rolls back everything
    pending; otherwise changes are committed only by :meth:`save_changes`,
    or implicitly on exit when ``commit_on_exit`` is set.

    Repositories are created on first access and cached, so every repository
    of one unit shares the same session. A unit can be entered only once.

    Examples
    --------
    >>> async with SQLAlchemyUnitOfWork(session_maker, lambda: storage) as uow:
    ...     await uow.user.register(user)
    ...     await uow.save_changes()
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        storage_factory: Callable[[], BlobStorage],
        commit_on_exit: bool = False,
    ):
        self._session_factory = session_factory
        self._storage_factory = storage_factory
        self._commit_on_exit = commit_on_exit

        self._session: AsyncSession | None = None
        self._entered = False

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._category_repo: CategoryRepositorySQLAlchemy | None = None
        self._provider_repo: ProviderRepositorySQLAlchemy | None = None
        self._storage: BlobStorage | None = None

    @property
    def session(self) -> AsyncSession:
        return self._require_session()

    @property
    def user(self) -> UserRepositorySQLAlchemy:
        session = self._require_session()
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(session)
        return self._user_repo

    @property
    def category(self) -> CategoryRepositorySQLAlchemy:
        session = self._require_session()
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(session)
        return self._category_repo

    @property
    def provider(self) -> ProviderRepositorySQLAlchemy:
        session = self._require_session()
        if self._provider_repo is None:
            self._provider_repo = ProviderRepositorySQLAlchemy(session)
        return self._provider_repo

    @property
    def storage(self) -> BlobStorage:
        self._require_session()
        if self._storage is None:
            self._storage = self._storage_factory()
        return self._storage

    async def save_changes(self) -> None:
        await self._require_session().commit()
        logger.debug("Unit of work committed")

    async def rollback(self) -> None:
        await self._require_session().rollback()
        logger.debug("Unit of work rolled back")

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        if self._entered:
            msg = "A unit of work cannot be entered more than once"
            raise RuntimeError(msg)
        self._entered = True
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        session = self._session
        if session is None:
            return

        try:
            if exc_type is not None:
                logger.debug("Rolling back unit of work after %s", exc_type.__name__)
                await session.rollback()
            elif self._commit_on_exit:
                await session.commit()
        finally:
            await session.close()
            self._session = None
            self._user_repo = None
            self._category_repo = None
            self._provider_repo = None
            self._storage = None

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            msg = "Unit of work is not active; use it inside 'async with'"
            raise RuntimeError(msg)
        return self._session
