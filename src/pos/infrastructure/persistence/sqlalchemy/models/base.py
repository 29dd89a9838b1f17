"""SQLAlchemy base configuration."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from pos.domain.shared.time import utc_now
from pos.domain.shared.value_objects import EntityState


class Base(DeclarativeBase):
    """Base class for all database models."""


class AuditMixin:
    """Audit columns shared by every back-office table.

    Rows are soft deleted: ``audit_delete_*`` is filled instead of removing
    the row.
    """

    audit_create_user: Mapped[int] = mapped_column(Integer, nullable=False)
    audit_create_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    audit_update_user: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    audit_update_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    audit_delete_user: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    audit_delete_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )


class StateMixin:
    """Integer state column (1 = active, 0 = inactive)."""

    state: Mapped[int] = mapped_column(
        Integer,
        default=int(EntityState.ACTIVE),
        nullable=False,
    )
