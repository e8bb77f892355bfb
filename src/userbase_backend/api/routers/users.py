"""CRUD endpoints for user records."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from userbase_backend.api.dependencies import get_user_service
from userbase_backend.api.models import (
    ErrorResponse,
    MessageResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from userbase_backend.api.services import (
    UserNotFoundError,
    UserService,
    UserStoreError,
)

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

ServiceDep = Annotated[UserService, Depends(get_user_service)]
UserId = Annotated[int, Path(alias="userId")]

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


def _store_error(exc: UserStoreError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )


# Creation answers 200, not 201.
@router.post("", response_model=UserResponse)
async def create_user(payload: UserCreateRequest, service: ServiceDep) -> UserResponse:
    """Validate and store a new user."""

    try:
        user = await service.create_user(payload)
    except UserStoreError as exc:
        raise _store_error(exc) from exc
    return UserResponse.model_validate(user)


@router.get("", response_model=list[UserResponse])
async def list_users(service: ServiceDep) -> list[UserResponse]:
    """Return every stored user."""

    try:
        users = await service.list_users()
    except UserStoreError as exc:
        raise _store_error(exc) from exc
    return [UserResponse.model_validate(user) for user in users]


@router.get("/{userId}", response_model=UserResponse, responses=_NOT_FOUND)
async def get_user(user_id: UserId, service: ServiceDep) -> UserResponse:
    """Return a single user by identifier."""

    try:
        user = await service.get_user(user_id)
    except UserNotFoundError as exc:
        raise _not_found() from exc
    except UserStoreError as exc:
        raise _store_error(exc) from exc
    return UserResponse.model_validate(user)


@router.put("/{userId}", response_model=UserResponse, responses=_NOT_FOUND)
async def update_user(
    user_id: UserId, payload: UserUpdateRequest, service: ServiceDep
) -> UserResponse:
    """Overwrite the provided fields of an existing user."""

    try:
        user = await service.update_user(user_id, payload)
    except UserNotFoundError as exc:
        raise _not_found() from exc
    except UserStoreError as exc:
        raise _store_error(exc) from exc
    return UserResponse.model_validate(user)


@router.delete("/{userId}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_user(user_id: UserId, service: ServiceDep) -> MessageResponse:
    """Permanently remove a user."""

    try:
        await service.delete_user(user_id)
    except UserNotFoundError as exc:
        raise _not_found() from exc
    except UserStoreError as exc:
        raise _store_error(exc) from exc
    return MessageResponse(message="User deleted successfully")
