"""Repository behaviour against a real SQLAlchemy engine on SQLite."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from userbase_backend.database import (
    DatabaseService,
    RecordNotFoundError,
    UserRepository,
)

ALICE = {"email": "alice@example.com", "first_name": "Alice", "last_name": "Liddell"}
BOB = {"email": "bob@example.com", "first_name": "Bob", "last_name": "Builder"}


@pytest_asyncio.fixture()
async def database(database_url: str) -> AsyncIterator[DatabaseService]:
    service = DatabaseService(database_url)
    await service.create_schema()
    yield service
    await service.dispose()


@pytest.mark.asyncio
async def test_create_assigns_id_and_timestamps(database: DatabaseService) -> None:
    async with database.session() as session:
        user = await UserRepository(session).create(
            {**ALICE, "social": {"github": "https://github.com/alice"}}
        )

    assert user.id is not None
    assert user.created_at is not None
    assert user.updated_at is not None

    async with database.session() as session:
        stored = await UserRepository(session).find_unique(user.id)

    assert stored is not None
    assert stored.email == ALICE["email"]
    assert stored.social == {"github": "https://github.com/alice"}


@pytest.mark.asyncio
async def test_find_many_orders_by_id(database: DatabaseService) -> None:
    async with database.session() as session:
        repository = UserRepository(session)
        first = await repository.create(ALICE)
        second = await repository.create(BOB)

    async with database.session() as session:
        users = await UserRepository(session).find_many()

    assert [user.id for user in users] == [first.id, second.id]


@pytest.mark.asyncio
async def test_find_unique_returns_none_for_unknown_id(database: DatabaseService) -> None:
    async with database.session() as session:
        assert await UserRepository(session).find_unique(999_999) is None


@pytest.mark.asyncio
async def test_update_overwrites_given_columns(database: DatabaseService) -> None:
    async with database.session() as session:
        user = await UserRepository(session).create(ALICE)

    async with database.session() as session:
        updated = await UserRepository(session).update(user.id, {"first_name": "Al"})

    assert updated.first_name == "Al"
    assert updated.last_name == ALICE["last_name"]
    assert updated.email == ALICE["email"]


@pytest.mark.asyncio
async def test_update_unknown_id_raises(database: DatabaseService) -> None:
    async with database.session() as session:
        with pytest.raises(RecordNotFoundError) as exc_info:
            await UserRepository(session).update(42, {"first_name": "Nobody"})

    assert exc_info.value.user_id == 42


@pytest.mark.asyncio
async def test_delete_removes_record(database: DatabaseService) -> None:
    async with database.session() as session:
        user = await UserRepository(session).create(ALICE)

    async with database.session() as session:
        await UserRepository(session).delete(user.id)

    async with database.session() as session:
        repository = UserRepository(session)
        assert await repository.find_unique(user.id) is None
        with pytest.raises(RecordNotFoundError):
            await repository.delete(user.id)


@pytest.mark.asyncio
async def test_duplicate_email_violates_constraint(database: DatabaseService) -> None:
    async with database.session() as session:
        await UserRepository(session).create(ALICE)

    with pytest.raises(IntegrityError):
        async with database.session() as session:
            await UserRepository(session).create({**BOB, "email": ALICE["email"]})

    async with database.session() as session:
        assert len(await UserRepository(session).find_many()) == 1


@pytest.mark.asyncio
async def test_session_rolls_back_on_error(database: DatabaseService) -> None:
    with pytest.raises(RuntimeError):
        async with database.session() as session:
            await UserRepository(session).create(ALICE)
            raise RuntimeError("abort")

    async with database.session() as session:
        assert await UserRepository(session).find_many() == []


@pytest.mark.asyncio
async def test_ping_succeeds_for_reachable_store(database: DatabaseService) -> None:
    await database.ping()
