"""Persistence repositories built on SQLAlchemy sessions."""

from userbase_backend.database.repositories.user import (
    RecordNotFoundError,
    UserRepository,
)

__all__ = ["RecordNotFoundError", "UserRepository"]
