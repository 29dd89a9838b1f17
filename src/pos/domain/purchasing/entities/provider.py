"""Provider (supplier) entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from pos.domain.shared.value_objects import AuditTrail, EntityState


@dataclass
class Provider:
    name: str
    email: str
    document_type_id: int
    document_number: str
    phone: str
    audit: AuditTrail
    address: str | None = None
    state: EntityState = EntityState.ACTIVE
    id: int | None = field(default=None)

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        name: str,
        email: str,
        document_type_id: int,
        document_number: str,
        phone: str,
        created_by: int,
        address: str | None = None,
    ) -> Provider:
        return cls(
            name=name,
            email=email,
            document_type_id=document_type_id,
            document_number=document_number,
            phone=phone,
            address=address,
            audit=AuditTrail.created(created_by),
        )
