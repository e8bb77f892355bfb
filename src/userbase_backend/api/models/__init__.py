"""Models used for API request and response payloads."""

from userbase_backend.api.models.user import (
    ErrorResponse,
    MessageResponse,
    SocialLinks,
    UserCreateRequest,
    UserRequest,
    UserResponse,
    UserUpdateRequest,
    first_error_message,
)

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "SocialLinks",
    "UserCreateRequest",
    "UserRequest",
    "UserResponse",
    "UserUpdateRequest",
    "first_error_message",
]
