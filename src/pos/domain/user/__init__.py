"""User domain: the back-office principal."""

from pos.domain.user.aggregates import User
from pos.domain.user.exceptions import UsernameAlreadyExistsError
from pos.domain.user.repositories import UserRepository
from pos.domain.user.value_objects import AuthType

__all__ = [
    "AuthType",
    "User",
    "UserRepository",
    "UsernameAlreadyExistsError",
]
