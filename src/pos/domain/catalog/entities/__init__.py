from pos.domain.catalog.entities.category import Category

__all__ = ["Category"]
