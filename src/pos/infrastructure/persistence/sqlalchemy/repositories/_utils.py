"""Shared utilities for SQLAlchemy repositories."""

from pos.domain.shared.time import ensure_tz_aware
from pos.domain.shared.value_objects import AuditTrail
from pos.infrastructure.persistence.sqlalchemy.models import AuditMixin


def audit_from_model(model: AuditMixin) -> AuditTrail:
    """Rebuild an AuditTrail from the audit columns of ``model``.

    SQLite drops the timezone of stored datetimes, so every value is
    normalised back to UTC.
    """
    return AuditTrail(
        created_by=model.audit_create_user,
        created_at=ensure_tz_aware(model.audit_create_date),
        updated_by=model.audit_update_user,
        updated_at=(
            ensure_tz_aware(model.audit_update_date)
            if model.audit_update_date
            else None
        ),
        deleted_by=model.audit_delete_user,
        deleted_at=(
            ensure_tz_aware(model.audit_delete_date)
            if model.audit_delete_date
            else None
        ),
    )


def audit_columns(audit: AuditTrail) -> dict:
    """Column values for an AuditTrail, suitable as model constructor kwargs."""
    return {
        "audit_create_user": audit.created_by,
        "audit_create_date": audit.created_at,
        "audit_update_user": audit.updated_by,
        "audit_update_date": audit.updated_at,
        "audit_delete_user": audit.deleted_by,
        "audit_delete_date": audit.deleted_at,
    }
