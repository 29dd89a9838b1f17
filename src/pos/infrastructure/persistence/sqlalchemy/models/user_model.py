"""SQLAlchemy model for the User aggregate."""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pos.infrastructure.persistence.sqlalchemy.models.base import (
    AuditMixin,
    Base,
    StateMixin,
)


class UserModel(Base, AuditMixin, StateMixin):
    """
    SQLAlchemy model for persisting User aggregates.

    The unique constraint on ``username`` is what rejects a second
    registration with the same name.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    auth_type: Mapped[Optional[str]] = mapped_column(String(15), nullable=True)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username={self.username})>"
