"""Request DTOs for the user use cases."""

from dataclasses import dataclass, field
from typing import Optional

from pos.domain.user import AuthType


@dataclass(frozen=True)
class TokenRequest:
    """Credentials supplied at login. Never persisted."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class ImageUpload:
    """Binary image attached to a request."""

    content: bytes = field(repr=False)
    filename: Optional[str] = None
    content_type: Optional[str] = None


@dataclass(frozen=True)
class UserRequest:
    """Registration request.

    Fields are optional at this level: the validator reports every missing
    value at once instead of failing on construction.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    image: Optional[ImageUpload] = None
    auth_type: AuthType = AuthType.INTERNAL
