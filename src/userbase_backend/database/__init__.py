"""Database connectivity helpers and configuration objects."""

from userbase_backend.database.base import BaseSchema
from userbase_backend.database.dependencies import (
    get_database,
    get_session,
    get_user_repository,
)
from userbase_backend.database.repositories import RecordNotFoundError, UserRepository
from userbase_backend.database.schemas import UserSchema
from userbase_backend.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "RecordNotFoundError",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
    "get_user_repository",
]
