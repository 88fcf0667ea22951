# Repositories package init
"""
UserBoard Backend — Storage Access Layer
==========================================

What:  Owns the users collection. Everything above this layer is stateless.

Repository Inventory:
    - UserRepository (abstract): create / list / delete contract
    - InMemoryUserRepository: dict keyed by id behind one asyncio.Lock (default)
    - SqlUserRepository: async SQLAlchemy over any supported database URL

build_repository() selects the implementation from STORAGE_BACKEND.
"""

from userboard.config import Settings, settings as default_settings
from userboard.database import build_engine
from userboard.repositories.base import UserRepository
from userboard.repositories.memory import InMemoryUserRepository
from userboard.repositories.sql import SqlUserRepository

__all__ = [
    "UserRepository",
    "InMemoryUserRepository",
    "SqlUserRepository",
    "build_repository",
]


def build_repository(config: Settings = default_settings) -> UserRepository:
    """Instantiate the repository named by config.storage_backend."""
    if config.storage_backend == "sql":
        return SqlUserRepository(
            build_engine(config.database_url),
            create_tables=config.db_create_all,
        )
    return InMemoryUserRepository()
