"""
UserBoard Backend — In-Memory User Repository
===============================================

What:  Default storage: a dict mapping id → User, guarded by one asyncio.Lock.
How:   A monotonically increasing counter hands out ids. Every read and write
       holds the lock, so concurrent requests on the event loop never observe
       a half-applied save or collide on id assignment.
When:  Lives for the life of the process; contents vanish on restart.
"""

import asyncio
import logging
from typing import Dict, List

from userboard.models.user import User
from userboard.repositories.base import UserRepository

logger = logging.getLogger(__name__)


def _detached_copy(user: User) -> User:
    return User(id=user.id, name=user.name, email=user.email)


class InMemoryUserRepository(UserRepository):
    """
    Process-local users collection.

    Stored entities are private copies; callers only ever receive copies,
    so mutating a returned User never changes what is stored.
    """

    backend_name = "memory"

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def list_all(self) -> List[User]:
        async with self._lock:
            return [_detached_copy(user) for user in self._users.values()]

    async def save(self, user: User) -> User:
        async with self._lock:
            if user.id is None:
                user_id = self._next_id
                self._next_id += 1
            else:
                user_id = user.id
                self._next_id = max(self._next_id, user_id + 1)

            stored = User(id=user_id, name=user.name, email=user.email)
            self._users[user_id] = stored
            logger.debug("Stored user %d (%d total)", user_id, len(self._users))
            return _detached_copy(stored)

    async def delete_by_id(self, user_id: int) -> None:
        async with self._lock:
            removed = self._users.pop(user_id, None)
        if removed is None:
            logger.debug("Delete of unknown user %d ignored", user_id)

    async def ping(self) -> bool:
        return True
