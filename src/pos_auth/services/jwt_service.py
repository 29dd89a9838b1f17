"""JWT token service.

Issues signed identity tokens for verified principals and reads them back.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Protocol
from uuid import uuid4

import jwt

from pos_auth.exceptions import InvalidTokenError, TokenConfigurationError
from pos_auth.schemas import TokenPayload

if TYPE_CHECKING:
    from pos_config import Settings


class TokenSubject(Protocol):
    """Anything a token can be issued for."""

    @property
    def id(self) -> int | None: ...

    @property
    def username(self) -> str: ...

    @property
    def email(self) -> str: ...


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass(frozen=True)
class JWTConfig:
    """Signing configuration for :class:`JWTService`.

    Attributes
    ----------
    secret_key
        Symmetric HMAC key. Must not be empty.
    issuer
        Value of the ``iss`` claim.
    audience
        Value of the ``aud`` claim. Defaults to ``issuer``.
    expire_hours
        Token lifetime in whole hours. Must be a positive integer.
    """

    secret_key: str
    issuer: str
    audience: str | None = None
    expire_hours: int = 8

    def __post_init__(self) -> None:
        if not self.secret_key:
            msg = "JWT secret key cannot be empty"
            raise TokenConfigurationError(msg)

        if not self.issuer:
            msg = "JWT issuer cannot be empty"
            raise TokenConfigurationError(msg)

        hours = self.expire_hours
        if isinstance(hours, str):
            try:
                hours = int(hours.strip())
            except ValueError:
                msg = f"JWT expiry must be a whole number of hours, got {self.expire_hours!r}"
                raise TokenConfigurationError(msg) from None
        if isinstance(hours, bool) or not isinstance(hours, int):
            msg = f"JWT expiry must be a whole number of hours, got {self.expire_hours!r}"
            raise TokenConfigurationError(msg)
        if hours <= 0:
            msg = "JWT expiry must be at least one hour"
            raise TokenConfigurationError(msg)

        object.__setattr__(self, "expire_hours", hours)
        if not self.audience:
            object.__setattr__(self, "audience", self.issuer)

    @classmethod
    def from_settings(cls, settings: Settings) -> JWTConfig:
        return cls(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            expire_hours=settings.jwt_expires_hours,
        )


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are HS256-signed and carry the principal's email, username and
    numeric id, a unique ``jti`` and the ``iat``/``nbf``/``exp`` window.

    Examples
    --------
    >>> service = JWTService(JWTConfig(secret_key="s3cret", issuer="pos"))
    >>> token = service.issue(user)
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    ALGORITHM = "HS256"

    def __init__(
        self,
        config: JWTConfig,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._config = config
        self._clock = clock
        self._expire = timedelta(hours=config.expire_hours)

    @property
    def config(self) -> JWTConfig:
        return self._config

    def issue(self, subject: TokenSubject) -> str:
        """Create a signed token for an already verified principal.

        Parameters
        ----------
        subject
            The authenticated principal

        Returns
        -------
        The encoded JWT token string
        """
        # JWT timestamps have second precision
        now = self._clock().replace(microsecond=0)

        payload: dict[str, Any] = {
            "sub": subject.email,
            "family_name": subject.username,
            "given_name": subject.email,
            "unique_name": str(subject.id),
            "jti": str(uuid4()),
            "iat": now,
            "nbf": now,
            "exp": now + self._expire,
            "iss": self._config.issuer,
            "aud": self._config.audience,
        }

        return jwt.encode(payload, self._config.secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._config.secret_key,
                algorithms=[self.ALGORITHM],
                audience=self._config.audience,
                issuer=self._config.issuer,
                options={"require": ["exp", "iat", "nbf", "jti", "sub"]},
            )

            return TokenPayload(
                user_id=int(payload["unique_name"]),
                username=payload["family_name"],
                email=payload["sub"],
                token_id=payload["jti"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                not_before=datetime.fromtimestamp(payload["nbf"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
