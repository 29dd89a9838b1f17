"""Request and response schemas."""

from pos.presentation.api.schemas.auth import TokenRequestSchema, UserResponse
from pos.presentation.api.schemas.common import (
    EnvelopeResponse,
    ErrorResponse,
    FieldErrorSchema,
    HealthResponse,
)

__all__ = [
    "EnvelopeResponse",
    "ErrorResponse",
    "FieldErrorSchema",
    "HealthResponse",
    "TokenRequestSchema",
    "UserResponse",
]
