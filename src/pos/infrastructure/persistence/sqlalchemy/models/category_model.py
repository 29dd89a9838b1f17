"""SQLAlchemy model for product categories."""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pos.infrastructure.persistence.sqlalchemy.models.base import (
    AuditMixin,
    Base,
    StateMixin,
)


class CategoryModel(Base, AuditMixin, StateMixin):
    """Table: categories"""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name={self.name})>"
