"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pos.domain.user import User, UsernameAlreadyExistsError, UserRepository
from pos.infrastructure.persistence.sqlalchemy.models import UserModel
from pos.infrastructure.persistence.sqlalchemy.repositories._utils import (
    audit_columns,
    audit_from_model,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserModel).where(
            UserModel.username == username,
            UserModel.audit_delete_date.is_(None),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def register(self, user: User) -> bool:
        model = self._map_to_model(user)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise UsernameAlreadyExistsError(user.username) from e
            raise

        user.assign_id(model.id)
        logger.info("Created user: %s (username: %s)", model.id, model.username)
        return model.id is not None

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            image=model.image,
            auth_type=model.auth_type,
            state=model.state,
            audit=audit_from_model(model),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            image=user.image,
            auth_type=user.auth_type.value if user.auth_type else None,
            state=int(user.state),
            **audit_columns(user.audit),
        )
