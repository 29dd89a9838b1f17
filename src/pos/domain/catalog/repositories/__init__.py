from pos.domain.catalog.repositories.category_repository import CategoryRepository

__all__ = ["CategoryRepository"]
