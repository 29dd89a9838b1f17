"""SQLAlchemy implementation of CategoryRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pos.domain.catalog import Category, CategoryRepository
from pos.domain.shared.value_objects import EntityState
from pos.infrastructure.persistence.sqlalchemy.models import CategoryModel
from pos.infrastructure.persistence.sqlalchemy.repositories._utils import (
    audit_columns,
    audit_from_model,
)

logger = logging.getLogger(__name__)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, category_id: int) -> Optional[Category]:
        stmt = select(CategoryModel).where(CategoryModel.id == category_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def list_active(self) -> list[Category]:
        stmt = (
            select(CategoryModel)
            .where(
                CategoryModel.state == int(EntityState.ACTIVE),
                CategoryModel.audit_delete_date.is_(None),
            )
            .order_by(CategoryModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def register(self, category: Category) -> bool:
        model = CategoryModel(
            name=category.name,
            description=category.description,
            state=int(category.state),
            **audit_columns(category.audit),
        )
        self._session.add(model)
        await self._session.flush()

        category.id = model.id
        logger.debug("Created category: %s (%s)", model.id, model.name)
        return model.id is not None

    def _map_to_domain(self, model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            name=model.name,
            description=model.description,
            state=EntityState(model.state),
            audit=audit_from_model(model),
        )
