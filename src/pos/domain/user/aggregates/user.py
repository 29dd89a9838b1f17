"""User aggregate: the principal of the back office."""

from __future__ import annotations

from typing import Union

from pos.domain.shared.value_objects import AuditTrail, EntityState
from pos.domain.user.value_objects import AuthType


class User:
    """
    User aggregate root.

    Holds the identity of a staff member. The password is only ever held in
    hashed form; the numeric id is assigned by the store on registration.
    """

    def __init__(  # noqa: PLR0913
        self,
        username: str,
        email: str,
        password_hash: str,
        audit: AuditTrail,
        image: str | None = None,
        auth_type: Union[str, AuthType, None] = AuthType.INTERNAL,
        state: Union[int, EntityState] = EntityState.ACTIVE,
        id: int | None = None,
    ):
        self._id = id
        self._username = username
        self._email = email
        self._password_hash = password_hash
        self._image = image
        self._auth_type = AuthType(auth_type) if auth_type else None
        self._state = EntityState(state)
        self._audit = audit

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def image(self) -> str | None:
        return self._image

    @property
    def auth_type(self) -> AuthType | None:
        return self._auth_type

    @property
    def state(self) -> EntityState:
        return self._state

    @property
    def audit(self) -> AuditTrail:
        return self._audit

    @property
    def is_active(self) -> bool:
        return self._state == EntityState.ACTIVE and not self._audit.is_deleted

    def attach_image(self, reference: str) -> None:
        self._image = reference

    def assign_id(self, user_id: int) -> None:
        """Record the identifier the store generated for this user."""
        if self._id is not None and self._id != user_id:
            msg = f"User already has id {self._id}"
            raise ValueError(msg)
        self._id = user_id

    @classmethod
    def register(
        cls,
        username: str,
        email: str,
        password_hash: str,
        created_by: int,
        auth_type: AuthType = AuthType.INTERNAL,
    ) -> User:
        return cls(
            username=username,
            email=email,
            password_hash=password_hash,
            audit=AuditTrail.created(created_by),
            auth_type=auth_type,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username!r})"
