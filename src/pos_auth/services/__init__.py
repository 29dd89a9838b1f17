"""Authentication services.

Provides password hashing and JWT token management.
"""

from pos_auth.services.jwt_service import JWTConfig, JWTService, TokenSubject
from pos_auth.services.password_service import (
    MAX_PASSWORD_BYTES,
    PasswordHashingService,
)

__all__ = [
    "JWTConfig",
    "JWTService",
    "MAX_PASSWORD_BYTES",
    "PasswordHashingService",
    "TokenSubject",
]
