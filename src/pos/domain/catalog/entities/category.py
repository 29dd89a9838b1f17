"""Product category entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from pos.domain.shared.value_objects import AuditTrail, EntityState


@dataclass
class Category:
    name: str
    audit: AuditTrail
    description: str | None = None
    state: EntityState = EntityState.ACTIVE
    id: int | None = field(default=None)

    @classmethod
    def create(
        cls,
        name: str,
        created_by: int,
        description: str | None = None,
    ) -> Category:
        return cls(
            name=name,
            description=description,
            audit=AuditTrail.created(created_by),
        )
