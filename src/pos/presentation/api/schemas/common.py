"""Common schemas shared across API endpoints."""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pos.application.responses import BaseResponse

T = TypeVar("T")


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")
    timestamp: datetime = Field(
        default_factory=_utc_now,
        description="When the error occurred",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "detail": "Username already registered: alice",
                "code": "DUPLICATE_USERNAME",
            },
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


class FieldErrorSchema(BaseModel):
    field: str
    message: str


class EnvelopeResponse(BaseModel, Generic[T]):
    """Wire form of a use case result."""

    is_success: bool
    data: Optional[T] = None
    message: str = ""
    errors: list[FieldErrorSchema] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: BaseResponse[Any]) -> "EnvelopeResponse[T]":
        return cls(
            is_success=result.is_success,
            data=result.data,
            message=result.message,
            errors=[
                FieldErrorSchema(field=e.field, message=e.message)
                for e in result.errors
            ],
        )
