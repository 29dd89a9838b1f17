"""POS Auth - authentication primitives.

This package is independent of the POS domain model. It handles:
- Password hashing (bcrypt)
- JWT token issuance and verification

Architecture:
    pos_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from pos_auth import JWTConfig, JWTService, PasswordHashingService
"""

from pos_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    TokenConfigurationError,
)
from pos_auth.schemas import TokenPayload
from pos_auth.services import (
    MAX_PASSWORD_BYTES,
    JWTConfig,
    JWTService,
    PasswordHashingService,
    TokenSubject,
)

__all__ = [
    # Services
    "JWTConfig",
    "JWTService",
    "MAX_PASSWORD_BYTES",
    "PasswordHashingService",
    "TokenSubject",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "TokenConfigurationError",
]
