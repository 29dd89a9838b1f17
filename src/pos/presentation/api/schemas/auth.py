"""Authentication schemas for request/response models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pos.domain.user import User


class TokenRequestSchema(BaseModel):
    """Request schema for token generation."""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="Plaintext password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "cashier01",
                "password": "securepassword123",
            },
        },
    )


class UserResponse(BaseModel):
    """Public view of a user."""

    id: int
    username: str
    email: str
    image: Optional[str] = None
    auth_type: Optional[str] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            image=user.image,
            auth_type=user.auth_type.value if user.auth_type else None,
        )
