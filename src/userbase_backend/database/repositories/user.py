"""Repository helpers for working with users."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from userbase_backend.database.schemas import UserSchema


class RecordNotFoundError(LookupError):
    """Raised when an update or delete targets a missing record."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} does not exist")
        self.user_id = user_id


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, data: Mapping[str, Any]) -> UserSchema:
        """Insert a new user and return it with store-assigned columns loaded."""
        user = UserSchema(**data)
        self._session.add(user)
        await self._session.flush()
        await self._session.refresh(user)
        return user

    async def find_many(self) -> list[UserSchema]:
        """Return every user ordered by primary key."""
        result = await self._session.scalars(select(UserSchema).order_by(UserSchema.id))
        return list(result)

    async def find_unique(self, user_id: int) -> UserSchema | None:
        """Return user entity by user's ID."""
        return await self._session.get(UserSchema, user_id)

    async def update(self, user_id: int, data: Mapping[str, Any]) -> UserSchema:
        """Overwrite the given columns of an existing user."""
        user = await self._session.get(UserSchema, user_id)
        if user is None:
            raise RecordNotFoundError(user_id)
        for column, value in data.items():
            setattr(user, column, value)
        await self._session.flush()
        await self._session.refresh(user)
        return user

    async def delete(self, user_id: int) -> UserSchema:
        """Remove a user permanently and return the deleted entity."""
        user = await self._session.get(UserSchema, user_id)
        if user is None:
            raise RecordNotFoundError(user_id)
        await self._session.delete(user)
        await self._session.flush()
        return user

    async def commit(self) -> None:
        """Make the pending changes durable."""
        await self._session.commit()
