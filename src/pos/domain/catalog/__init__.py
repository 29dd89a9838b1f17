"""Catalog domain: product categories."""

from pos.domain.catalog.entities import Category
from pos.domain.catalog.repositories import CategoryRepository

__all__ = ["Category", "CategoryRepository"]
