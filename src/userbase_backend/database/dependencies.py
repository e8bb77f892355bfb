"""FastAPI dependencies for database access."""

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from userbase_backend.database.repositories import UserRepository
from userbase_backend.database.service import DatabaseService


def get_database(request: Request) -> DatabaseService:
    """Return the database service created by the application lifespan."""
    return request.app.state.database


async def get_session(
    db: Annotated[DatabaseService, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """Yield an async SQLAlchemy session managed by :class:`DatabaseService`."""
    async with db.session() as session:
        yield session


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UserRepository:
    """Return a repository bound to the request session."""
    return UserRepository(session)
