"""Provider repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pos.domain.purchasing.entities import Provider


class ProviderRepository(ABC):
    """Repository interface for providers."""

    @abstractmethod
    async def find_by_id(self, provider_id: int) -> Optional[Provider]:
        """Find a provider by its ID."""

    @abstractmethod
    async def list_active(self) -> list[Provider]:
        """List active, non-deleted providers ordered by name."""

    @abstractmethod
    async def register(self, provider: Provider) -> bool:
        """Insert a new provider and assign its generated id."""
