"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        Numeric identifier of the principal
    username
        The principal's username
    email
        The principal's email address (token subject)
    token_id
        Unique token identifier (``jti``), usable as a revocation key
    issued_at
        When the token was issued
    not_before
        Start of the validity window
    expires_at
        End of the validity window
    """

    user_id: int
    username: str
    email: str
    token_id: str
    issued_at: datetime
    not_before: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at
