"""SQLAlchemy implementation of ProviderRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pos.domain.purchasing import Provider, ProviderRepository
from pos.domain.shared.value_objects import EntityState
from pos.infrastructure.persistence.sqlalchemy.models import ProviderModel
from pos.infrastructure.persistence.sqlalchemy.repositories._utils import (
    audit_columns,
    audit_from_model,
)

logger = logging.getLogger(__name__)


class ProviderRepositorySQLAlchemy(ProviderRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, provider_id: int) -> Optional[Provider]:
        stmt = select(ProviderModel).where(ProviderModel.id == provider_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def list_active(self) -> list[Provider]:
        stmt = (
            select(ProviderModel)
            .where(
                ProviderModel.state == int(EntityState.ACTIVE),
                ProviderModel.audit_delete_date.is_(None),
            )
            .order_by(ProviderModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def register(self, provider: Provider) -> bool:
        model = ProviderModel(
            name=provider.name,
            email=provider.email,
            document_type_id=provider.document_type_id,
            document_number=provider.document_number,
            address=provider.address,
            phone=provider.phone,
            state=int(provider.state),
            **audit_columns(provider.audit),
        )
        self._session.add(model)
        await self._session.flush()

        provider.id = model.id
        logger.debug("Created provider: %s (%s)", model.id, model.name)
        return model.id is not None

    def _map_to_domain(self, model: ProviderModel) -> Provider:
        return Provider(
            id=model.id,
            name=model.name,
            email=model.email,
            document_type_id=model.document_type_id,
            document_number=model.document_number,
            address=model.address,
            phone=model.phone,
            state=EntityState(model.state),
            audit=audit_from_model(model),
        )
