"""
UserBoard Backend — SQL User Repository
=========================================

What:  Storage over async SQLAlchemy. With the default URL
       (sqlite+aiosqlite://) this is an in-memory relational store; pointed
       at PostgreSQL it becomes durable.
How:   Every call runs in its own session_scope(): commit on success,
       rollback on failure. SQLAlchemy errors are translated to StorageError
       so the HTTP layer answers with a generic 500.
       When the engine shares a single connection (StaticPool), calls are
       serialized with an asyncio.Lock so sessions never interleave.

Query plan:
    list_all      SELECT ... FROM users ORDER BY id
    save (new)    INSERT, id from AUTOINCREMENT / SERIAL
    save (id set) SELECT by primary key, then INSERT or UPDATE (Session.merge)
    delete_by_id  DELETE ... WHERE id = :id (zero rows is fine)
"""

import asyncio
import logging
from contextlib import nullcontext
from typing import List

from sqlalchemy import delete, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.pool import StaticPool

from userboard.database import (
    build_session_factory,
    dispose_engine,
    init_models,
    session_scope,
)
from userboard.exceptions import StorageError
from userboard.models.user import User
from userboard.repositories.base import UserRepository

logger = logging.getLogger(__name__)


class SqlUserRepository(UserRepository):
    """
    Users table accessed through async SQLAlchemy.

    Args:
        engine: Async engine (see database.build_engine)
        create_tables: Run metadata.create_all in initialize()
    """

    backend_name = "sql"

    def __init__(self, engine: AsyncEngine, create_tables: bool = True) -> None:
        self.engine = engine
        self.create_tables = create_tables
        self._session_factory = build_session_factory(engine)
        # A StaticPool hands every session the same connection, so overlapping
        # sessions would share one transaction. Calls are serialized in that case.
        self._lock = asyncio.Lock() if isinstance(engine.pool, StaticPool) else None

    def _serialized(self):
        return self._lock if self._lock is not None else nullcontext()

    async def initialize(self) -> None:
        if self.create_tables:
            try:
                await init_models(self.engine)
            except SQLAlchemyError as e:
                raise self._storage_error("initialize", e) from e
            logger.info("Users table ready on %s", self.engine.url.render_as_string(hide_password=True))

    async def close(self) -> None:
        await dispose_engine(self.engine)

    async def list_all(self) -> List[User]:
        try:
            async with self._serialized(), session_scope(self._session_factory) as session:
                result = await session.execute(select(User).order_by(User.id))
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._storage_error("list_all", e) from e

    async def save(self, user: User) -> User:
        entity = User(id=user.id, name=user.name, email=user.email)
        try:
            async with self._serialized(), session_scope(self._session_factory) as session:
                if entity.id is None:
                    session.add(entity)
                    stored = entity
                else:
                    stored = await session.merge(entity)
                # Assigns the primary key for new rows
                await session.flush()
            return stored
        except SQLAlchemyError as e:
            raise self._storage_error("save", e) from e

    async def delete_by_id(self, user_id: int) -> None:
        try:
            async with self._serialized(), session_scope(self._session_factory) as session:
                result = await session.execute(delete(User).where(User.id == user_id))
            if result.rowcount == 0:
                logger.debug("Delete of unknown user %d ignored", user_id)
        except SQLAlchemyError as e:
            raise self._storage_error("delete_by_id", e) from e

    async def ping(self) -> bool:
        try:
            async with self._serialized(), self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Storage ping failed: %s", str(e))
            return False

    @staticmethod
    def _storage_error(operation: str, error: Exception) -> StorageError:
        logger.error("Storage error during %s: %s", operation, str(error), exc_info=True)
        return StorageError(
            operation=operation,
            context={"error_type": type(error).__name__},
        )
