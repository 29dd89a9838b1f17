"""Uniform response envelope returned by every application use case."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ReplyMessage:
    """Message codes carried by :class:`BaseResponse`."""

    MESSAGE_TOKEN = "Token generated successfully"
    MESSAGE_TOKEN_ERROR = "Invalid username or password"
    MESSAGE_VALIDATE = "Validation failed"
    MESSAGE_SAVE = "Record saved successfully"
    MESSAGE_FAILED = "The operation could not be completed"
    MESSAGE_EXCEPTION = "An unexpected error occurred, please try again later"


@dataclass(frozen=True)
class FieldError:
    """A single validation failure attached to a request field."""

    field: str
    message: str


@dataclass(frozen=True)
class BaseResponse(Generic[T]):
    """Success flag, payload, message and field errors of a use case.

    A successful response always carries data and never errors; a failed
    response carries the zero value of its payload type (``None``,
    ``False``, ...).
    """

    is_success: bool
    data: Optional[T] = None
    message: str = ""
    errors: tuple[FieldError, ...] = ()

    def __post_init__(self) -> None:
        if self.is_success and (self.data is None or self.errors):
            msg = "A successful response needs data and no errors"
            raise ValueError(msg)
        if not self.is_success and self.data:
            msg = "A failed response cannot carry data"
            raise ValueError(msg)

    @classmethod
    def success(cls, data: T, message: str) -> BaseResponse[T]:
        return cls(is_success=True, data=data, message=message)

    @classmethod
    def failure(
        cls,
        message: str,
        errors: tuple[FieldError, ...] = (),
        data: Optional[T] = None,
    ) -> BaseResponse[T]:
        return cls(is_success=False, data=data, message=message, errors=tuple(errors))
