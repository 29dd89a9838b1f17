"""SQLAlchemy models for persistence layer."""

from pos.infrastructure.persistence.sqlalchemy.models.base import (
    AuditMixin,
    Base,
    StateMixin,
)
from pos.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from pos.infrastructure.persistence.sqlalchemy.models.provider_model import (
    ProviderModel,
)
from pos.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "AuditMixin",
    "StateMixin",
    "UserModel",
    "CategoryModel",
    "ProviderModel",
]
