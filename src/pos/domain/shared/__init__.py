"""Shared domain components.

This module exports shared value objects, exceptions, and helpers
used across domain boundaries.
"""

from pos.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
)
from pos.domain.shared.time import utc_now
from pos.domain.shared.value_objects import AuditTrail, EntityState

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ConflictError",
    # Value objects
    "AuditTrail",
    "EntityState",
    # Utilities
    "utc_now",
]
