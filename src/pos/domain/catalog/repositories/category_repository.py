"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pos.domain.catalog.entities import Category


class CategoryRepository(ABC):
    """Repository interface for product categories."""

    @abstractmethod
    async def find_by_id(self, category_id: int) -> Optional[Category]:
        """Find a category by its ID."""

    @abstractmethod
    async def list_active(self) -> list[Category]:
        """List active, non-deleted categories ordered by name."""

    @abstractmethod
    async def register(self, category: Category) -> bool:
        """Insert a new category and assign its generated id."""
