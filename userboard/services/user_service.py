"""
UserBoard Backend — User Service
==================================

What:  Forwards user operations to the configured repository unchanged.
How:   Converts UserCreate → User entity on the way in and User →
       UserResponse on the way out. No validation, authorization, or
       transformation of field values.
Who:   Called by the /api/users route handlers via get_user_service().
"""

import logging
from typing import List

from userboard.models.user import User
from userboard.repositories.base import UserRepository
from userboard.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)


class UserService:
    """
    Pass-through business layer for users.

    Storage errors (StorageError) propagate untouched to the global
    exception handlers.
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def list_users(self) -> List[UserResponse]:
        users = await self.repository.list_all()
        return [UserResponse.model_validate(user) for user in users]

    async def create_user(self, payload: UserCreate) -> UserResponse:
        """
        Store a new user and return it with its assigned id.

        Args:
            payload: Request body; name and email are stored verbatim.
        """
        user = await self.repository.save(User(name=payload.name, email=payload.email))
        logger.info("User %d created", user.id)
        return UserResponse.model_validate(user)

    async def delete_user(self, user_id: int) -> None:
        """Delete a user by id. Unknown ids are accepted silently."""
        await self.repository.delete_by_id(user_id)
        logger.info("User %d deleted", user_id)
