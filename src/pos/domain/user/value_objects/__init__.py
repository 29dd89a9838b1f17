"""Value objects for the user domain."""

from pos.domain.user.value_objects.auth_type import AuthType

__all__ = ["AuthType"]
