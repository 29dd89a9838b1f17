"""Application services."""

from pos.application.services.user_application import SYSTEM_USER_ID, UserApplication

__all__ = ["SYSTEM_USER_ID", "UserApplication"]
