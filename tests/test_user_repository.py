"""
UserBoard Backend — Repository Tests
======================================

What:  Storage contract tests, run against both backends via the
       parametrized `repository` fixture.

What we test:
    ✅ Id assignment on save (non-null, unused, increasing)
    ✅ Ids are not reused after deletion
    ✅ Delete of a missing id is a silent no-op
    ✅ N saves and M deletes leave N−M records
    ✅ Explicit id → insert or replace, counter advances
    ✅ Concurrent saves, deletes and lists keep ids distinct and lose nothing
    ✅ SQL failures surface as StorageError
"""

import asyncio

import pytest
from sqlalchemy.pool import StaticPool

from userboard.database import build_engine
from userboard.exceptions import StorageError
from userboard.models.user import User
from userboard.repositories import SqlUserRepository


class TestSave:
    """Tests for save() id assignment and insert-or-replace."""

    @pytest.mark.asyncio
    async def test_save_assigns_id(self, repository):
        stored = await repository.save(User(name="Alice", email="alice@example.com"))

        assert stored.id is not None
        assert stored.name == "Alice"
        assert stored.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_sequential_saves_get_increasing_ids(self, repository):
        first = await repository.save(User(name="A", email="a@example.com"))
        second = await repository.save(User(name="B", email="b@example.com"))

        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_ids_not_reused_after_delete(self, repository):
        saved = [await repository.save(User(name=f"user-{i}")) for i in range(3)]
        highest = saved[-1].id

        await repository.delete_by_id(highest)
        fresh = await repository.save(User(name="late"))

        assert fresh.id > highest
        assert fresh.id not in {u.id for u in saved}

    @pytest.mark.asyncio
    async def test_save_does_not_mutate_argument(self, repository):
        user = User(name="Alice", email=None)
        await repository.save(user)
        assert user.id is None

    @pytest.mark.asyncio
    async def test_save_with_id_replaces_record(self, repository):
        original = await repository.save(User(name="Alice", email="alice@example.com"))

        await repository.save(User(id=original.id, name="Alicia", email="alicia@example.com"))
        users = await repository.list_all()

        assert len(users) == 1
        assert users[0].id == original.id
        assert users[0].name == "Alicia"
        assert users[0].email == "alicia@example.com"

    @pytest.mark.asyncio
    async def test_save_with_new_explicit_id_inserts_and_advances_counter(self, repository):
        explicit = await repository.save(User(id=10, name="Ten"))
        automatic = await repository.save(User(name="Next"))

        assert explicit.id == 10
        assert automatic.id > 10

    @pytest.mark.asyncio
    async def test_free_text_fields_stored_verbatim(self, repository):
        stored = await repository.save(User(name="", email="not an address"))

        assert stored.name == ""
        assert stored.email == "not an address"


class TestListAndDelete:
    """Tests for list_all() and delete_by_id()."""

    @pytest.mark.asyncio
    async def test_list_empty(self, repository):
        assert await repository.list_all() == []

    @pytest.mark.asyncio
    async def test_list_after_saves_and_deletes(self, repository):
        saved = [await repository.save(User(name=f"user-{i}")) for i in range(5)]

        await repository.delete_by_id(saved[0].id)
        await repository.delete_by_id(saved[3].id)
        users = await repository.list_all()

        assert len(users) == 3
        assert {u.id for u in users} == {saved[1].id, saved[2].id, saved[4].id}

    @pytest.mark.asyncio
    async def test_list_returns_insertion_order(self, repository):
        for name in ("A", "B", "C"):
            await repository.save(User(name=name))

        assert [u.name for u in await repository.list_all()] == ["A", "B", "C"]

    @pytest.mark.asyncio
    async def test_delete_missing_id_is_noop(self, repository):
        await repository.save(User(name="Alice"))

        await repository.delete_by_id(999)
        users = await repository.list_all()

        assert [u.name for u in users] == ["Alice"]

    @pytest.mark.asyncio
    async def test_delete_twice_is_noop(self, repository):
        stored = await repository.save(User(name="Alice"))

        await repository.delete_by_id(stored.id)
        await repository.delete_by_id(stored.id)

        assert await repository.list_all() == []

    @pytest.mark.asyncio
    async def test_ping(self, repository):
        assert await repository.ping() is True


class TestConcurrency:
    """Overlapping calls on one repository, both backends."""

    @pytest.mark.asyncio
    async def test_concurrent_saves_get_distinct_ids(self, repository):
        results = await asyncio.gather(
            *(repository.save(User(name=f"user-{i}")) for i in range(50))
        )

        ids = [u.id for u in results]
        assert len(set(ids)) == 50
        assert sorted(ids) == list(range(1, 51))
        assert len(await repository.list_all()) == 50

    @pytest.mark.asyncio
    async def test_concurrent_saves_deletes_and_lists(self, repository):
        originals = [await repository.save(User(name=f"old-{i}")) for i in range(10)]
        original_ids = {u.id for u in originals}

        results = await asyncio.gather(
            *(repository.save(User(name=f"new-{i}")) for i in range(10)),
            *(repository.delete_by_id(u.id) for u in originals),
            *(repository.list_all() for _ in range(10)),
        )

        created = results[:10]
        snapshots = results[20:]
        created_ids = {u.id for u in created}
        assert len(created_ids) == 10
        assert created_ids.isdisjoint(original_ids)
        for snapshot in snapshots:
            snapshot_ids = [u.id for u in snapshot]
            assert len(snapshot_ids) == len(set(snapshot_ids))

        remaining = await repository.list_all()
        assert {u.id for u in remaining} == created_ids
        assert sorted(u.name for u in remaining) == sorted(f"new-{i}" for i in range(10))


class TestInMemoryRepository:
    """Behavior specific to the dict-backed store."""

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, memory_repository):
        stored = await memory_repository.save(User(name="Alice"))
        stored.name = "Mallory"

        listed = await memory_repository.list_all()
        listed[0].email = "changed@example.com"

        users = await memory_repository.list_all()
        assert users[0].name == "Alice"
        assert users[0].email is None

    @pytest.mark.asyncio
    async def test_first_id_is_one(self, memory_repository):
        stored = await memory_repository.save(User(name="Alice"))
        assert stored.id == 1


class TestSqlRepository:
    """Behavior specific to the SQLAlchemy store."""

    @pytest.mark.asyncio
    async def test_missing_table_raises_storage_error(self):
        repo = SqlUserRepository(build_engine("sqlite+aiosqlite://"), create_tables=False)
        await repo.initialize()
        try:
            with pytest.raises(StorageError) as exc_info:
                await repo.list_all()
            assert exc_info.value.operation == "list_all"
            assert exc_info.value.context["error_type"] == "OperationalError"
        finally:
            await repo.close()

    @pytest.mark.asyncio
    async def test_single_connection_engine_serializes_calls(self, sql_repository):
        assert isinstance(sql_repository.engine.pool, StaticPool)
        assert sql_repository._lock is not None

    @pytest.mark.asyncio
    async def test_initialize_is_idempotent(self, sql_repository):
        await sql_repository.save(User(name="Alice"))

        await sql_repository.initialize()

        assert len(await sql_repository.list_all()) == 1
