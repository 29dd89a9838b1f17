"""SQLAlchemy persistence: models, repositories and the unit of work."""

from pos.infrastructure.persistence.sqlalchemy.unit_of_work import SQLAlchemyUnitOfWork

__all__ = ["SQLAlchemyUnitOfWork"]
