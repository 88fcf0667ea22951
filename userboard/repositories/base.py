"""
UserBoard Backend — Abstract User Repository
==============================================

What:  Abstract base class defining the storage contract for User records.
How:   Concrete implementations inherit from UserRepository and implement
       list_all(), save(), delete_by_id() and ping().
Who:   Called by UserService; built by repositories.build_repository().
"""

from abc import ABC, abstractmethod
from typing import List

from userboard.models.user import User


class UserRepository(ABC):
    """
    Storage contract for the users collection.

    Contract:
        - Ids are assigned by storage, unique, and never reused after deletion
        - Deleting a missing id is a silent no-op
        - Returned entities are detached from storage state

    Implementations:
        - InMemoryUserRepository: process-local, resets on restart
        - SqlUserRepository: any async SQLAlchemy database
    """

    # Reported by /health
    backend_name: str = ""

    @abstractmethod
    async def list_all(self) -> List[User]:
        """
        Return every stored user.

        Order is not part of the contract; both implementations return
        ascending id order.
        """
        ...

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Insert a user, or replace one when `user.id` is already set.

        Args:
            user: Entity to store. When id is None a fresh id is assigned.

        Returns:
            User: The stored record, including its id.

        An explicit id at or above the next automatic id advances the
        counter, so later automatic ids stay unique. This holds for the
        in-memory store and for SQLite (AUTOINCREMENT). On PostgreSQL an
        explicit id does not move the SERIAL sequence; a later automatic
        insert can collide with it and fail with StorageError.
        """
        ...

    @abstractmethod
    async def delete_by_id(self, user_id: int) -> None:
        """Remove the user with this id if present; no error otherwise."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """Lightweight liveness check for the health endpoint."""
        ...

    async def initialize(self) -> None:
        """Prepare storage on application startup."""

    async def close(self) -> None:
        """Release storage resources on application shutdown."""
