"""User management domain logic."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from userbase_backend.database import RecordNotFoundError
from userbase_backend.logging import get_logger

if TYPE_CHECKING:
    from userbase_backend.api.models import UserRequest
    from userbase_backend.database import UserRepository, UserSchema

_logger = get_logger("users")


class UserNotFoundError(Exception):
    """Raised when the requested user does not exist."""


class UserStoreError(Exception):
    """Raised when the data store fails; the message is safe to show callers."""


class UserService:
    """Orchestrates CRUD operations over a :class:`UserRepository`."""

    def __init__(
        self,
        repository: UserRepository,
        *,
        legacy_not_found_errors: bool = False,
    ) -> None:
        self._repository = repository
        self._legacy_not_found_errors = legacy_not_found_errors

    async def create_user(self, payload: UserRequest) -> UserSchema:
        try:
            user = await self._repository.create(payload.to_record())
            await self._repository.commit()
        except SQLAlchemyError as exc:
            raise self._store_failure("Failed to create user", exc) from exc
        return user

    async def list_users(self) -> list[UserSchema]:
        try:
            return await self._repository.find_many()
        except SQLAlchemyError as exc:
            raise self._store_failure("Failed to get users", exc) from exc

    async def get_user(self, user_id: int) -> UserSchema:
        try:
            user = await self._repository.find_unique(user_id)
        except SQLAlchemyError as exc:
            raise self._store_failure("Failed to get user", exc) from exc
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def update_user(self, user_id: int, payload: UserRequest) -> UserSchema:
        message = "Failed to update user"
        try:
            user = await self._repository.update(user_id, payload.to_record())
            await self._repository.commit()
        except RecordNotFoundError as exc:
            raise self._missing_record(message, exc) from exc
        except SQLAlchemyError as exc:
            raise self._store_failure(message, exc) from exc
        return user

    async def delete_user(self, user_id: int) -> None:
        message = "Failed to delete user"
        try:
            await self._repository.delete(user_id)
            await self._repository.commit()
        except RecordNotFoundError as exc:
            raise self._missing_record(message, exc) from exc
        except SQLAlchemyError as exc:
            raise self._store_failure(message, exc) from exc

    def _missing_record(
        self, message: str, exc: RecordNotFoundError
    ) -> UserNotFoundError | UserStoreError:
        if self._legacy_not_found_errors:
            return self._store_failure(message, exc)
        return UserNotFoundError(exc.user_id)

    @staticmethod
    def _store_failure(message: str, exc: Exception) -> UserStoreError:
        _logger.error("%s: %s", message, exc, exc_info=exc)
        return UserStoreError(message)
