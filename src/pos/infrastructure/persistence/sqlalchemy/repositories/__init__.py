"""SQLAlchemy repository implementations."""

from pos.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from pos.infrastructure.persistence.sqlalchemy.repositories.provider_repository import (  # NOQA: E501
    ProviderRepositorySQLAlchemy,
)
from pos.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "CategoryRepositorySQLAlchemy",
    "ProviderRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
