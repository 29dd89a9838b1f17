"""SQLAlchemy model for providers (suppliers)."""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pos.infrastructure.persistence.sqlalchemy.models.base import (
    AuditMixin,
    Base,
    StateMixin,
)


class ProviderModel(Base, AuditMixin, StateMixin):
    """
    Table: providers

    ``document_type_id`` references a document type catalogue that lives
    outside this schema, so it carries no foreign key.
    """

    __tablename__ = "providers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    document_type_id: Mapped[int] = mapped_column(Integer, nullable=False)
    document_number: Mapped[str] = mapped_column(String(20), nullable=False)
    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[str] = mapped_column(String(15), nullable=False)

    def __repr__(self) -> str:
        return f"<ProviderModel(id={self.id}, name={self.name})>"
