"""Service layer for API-specific business logic."""

from userbase_backend.api.services.users import (
    UserNotFoundError,
    UserService,
    UserStoreError,
)

__all__ = ["UserNotFoundError", "UserService", "UserStoreError"]
