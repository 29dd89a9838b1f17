"""Value objects shared across domain boundaries."""

from pos.domain.shared.value_objects.audit_trail import AuditTrail
from pos.domain.shared.value_objects.entity_state import EntityState

__all__ = ["AuditTrail", "EntityState"]
