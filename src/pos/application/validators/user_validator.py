"""Structural validation of registration requests.

Rules are declared as a pydantic model so that every field is checked and
all violations are reported together.
"""

import re
from collections.abc import Callable
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from pos.application.dtos import UserRequest
from pos.application.responses import FieldError
from pos.application.validators.validation_result import ValidationResult
from pos_auth import MAX_PASSWORD_BYTES

USERNAME_MAX_LENGTH = 50
# Matches the users.email column
EMAIL_MAX_LENGTH = 255

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def _required(value: Optional[str]) -> str:
    # Whitespace-only counts as missing
    if value is None or not value.strip():
        raise PydanticCustomError("required", "required")
    return value


def _max_length(limit: int) -> Callable[[str], str]:
    def check(value: str) -> str:
        if len(value.strip()) > limit:
            raise PydanticCustomError(
                "too_long",
                "must not exceed {max_length} characters",
                {"max_length": limit},
            )
        return value

    return check


def _email_format(value: str) -> str:
    if not EMAIL_PATTERN.match(value.strip()):
        raise PydanticCustomError("email_format", "must be a valid email address")
    return value


def _bcrypt_length(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise PydanticCustomError(
            "too_long",
            "must not exceed {max_bytes} bytes",
            {"max_bytes": MAX_PASSWORD_BYTES},
        )
    return value


class _UserRules(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: Annotated[
        Optional[str],
        AfterValidator(_required),
        AfterValidator(_max_length(USERNAME_MAX_LENGTH)),
    ] = None
    email: Annotated[
        Optional[str],
        AfterValidator(_required),
        AfterValidator(_max_length(EMAIL_MAX_LENGTH)),
        AfterValidator(_email_format),
    ] = None
    password: Annotated[
        Optional[str],
        AfterValidator(_required),
        AfterValidator(_bcrypt_length),
    ] = None


class UserValidator:
    """Validates a :class:`UserRequest` before any side effect happens."""

    def validate(self, request: UserRequest) -> ValidationResult:
        try:
            _UserRules.model_validate(
                {
                    "username": request.username,
                    "email": request.email,
                    "password": request.password,
                },
            )
        except PydanticValidationError as e:
            return ValidationResult(
                errors=tuple(
                    FieldError(field=str(error["loc"][0]), message=error["msg"])
                    for error in e.errors()
                ),
            )
        return ValidationResult()
