"""SQLAlchemy table definitions."""

from userbase_backend.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
