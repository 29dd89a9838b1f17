"""Audit trail value object shared by all back-office entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pos.domain.shared.time import utc_now


@dataclass(frozen=True)
class AuditTrail:
    """Who created, last updated and soft-deleted an entity, and when.

    Entities are never physically deleted: ``deleted_by``/``deleted_at``
    mark a soft delete.
    """

    created_by: int
    created_at: datetime
    updated_by: int | None = None
    updated_at: datetime | None = None
    deleted_by: int | None = None
    deleted_at: datetime | None = None

    @classmethod
    def created(cls, actor_id: int) -> AuditTrail:
        return cls(created_by=actor_id, created_at=utc_now())

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
