"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pos.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user that has not been soft-deleted by username."""

    @abstractmethod
    async def register(self, user: User) -> bool:
        """Insert a new user.

        Returns True iff the row was created; the generated id is assigned
        to ``user``. Raises UsernameAlreadyExistsError on a duplicate.
        Nothing is committed: the unit of work owns the transaction.
        """
