"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from userbase_backend.api.services import UserService
from userbase_backend.database import UserRepository, get_user_repository
from userbase_backend.settings import BackendSettings


def get_app_settings(request: Request) -> BackendSettings:
    """Return the settings the running application was built with."""

    return request.app.state.settings


SettingsDep = Annotated[BackendSettings, Depends(get_app_settings)]


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
    settings: SettingsDep,
) -> UserService:
    """Build a :class:`UserService` for the current request."""

    return UserService(
        repository, legacy_not_found_errors=settings.legacy_not_found_errors
    )


__all__ = ["SettingsDep", "get_app_settings", "get_user_service"]
