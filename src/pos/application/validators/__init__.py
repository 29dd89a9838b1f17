"""Request validators."""

from pos.application.validators.user_validator import UserValidator
from pos.application.validators.validation_result import ValidationResult

__all__ = ["UserValidator", "ValidationResult"]
