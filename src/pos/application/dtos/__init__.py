"""Data transfer objects for the application layer."""

from pos.application.dtos.user_dtos import ImageUpload, TokenRequest, UserRequest

__all__ = ["ImageUpload", "TokenRequest", "UserRequest"]
