"""Pydantic models for user endpoints.

Create and update payloads are generated from a single field table so the two
modes stay in sync: create requires every scalar field, update makes all of
them optional. Unknown keys are dropped. Validated strings are kept exactly
as submitted, normalisation done by the email and URL parsers is discarded.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    ValidationError,
    create_model,
)
from pydantic_core import PydanticCustomError

_EMAIL_ADAPTER: TypeAdapter[str] = TypeAdapter(EmailStr)
_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _check_email(value: str) -> str:
    try:
        _EMAIL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise PydanticCustomError("invalid_email", "must be a valid email") from exc
    return value


def _check_uri(value: str) -> str:
    # The URL parser silently strips whitespace and control characters.
    if any(char.isspace() or not char.isprintable() for char in value):
        raise PydanticCustomError("invalid_uri", "must be a valid uri")
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise PydanticCustomError("invalid_uri", "must be a valid uri") from exc
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email)]
Uri = Annotated[str, AfterValidator(_check_uri)]
NonEmptyStr = Annotated[str, Field(min_length=1)]


class SocialLinks(BaseModel):
    """Optional profile links; every value must be an absolute URI."""

    model_config = ConfigDict(extra="ignore")

    facebook: Uri = Field(default=None)
    twitter: Uri = Field(default=None)
    github: Uri = Field(default=None)
    website: Uri = Field(default=None)


class UserRequest(BaseModel):
    """Common behaviour of user payloads."""

    model_config = ConfigDict(extra="ignore")

    def to_record(self) -> dict[str, Any]:
        """Return the submitted fields keyed by column name."""

        return self.model_dump(exclude_unset=True)


# Declaration order is the order in which errors are reported.
_USER_FIELDS: dict[str, tuple[Any, str]] = {
    "email": (EmailAddress, "email"),
    "first_name": (NonEmptyStr, "firstName"),
    "last_name": (NonEmptyStr, "lastName"),
}


def _build_request_model(name: str, *, partial: bool, doc: str) -> type[UserRequest]:
    fields: dict[str, Any] = {}
    for attribute, (annotation, alias) in _USER_FIELDS.items():
        default = None if partial else ...
        fields[attribute] = (annotation, Field(default=default, alias=alias))
    fields["social"] = (SocialLinks, Field(default=None))
    return create_model(name, __base__=UserRequest, __doc__=doc, **fields)


UserCreateRequest = _build_request_model(
    "UserCreateRequest",
    partial=False,
    doc="Payload for creating a user; email, firstName and lastName are required.",
)
UserUpdateRequest = _build_request_model(
    "UserUpdateRequest",
    partial=True,
    doc="Payload for updating a user; only the provided fields are changed.",
)


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    email: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    social: dict[str, Any] | None = None
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str


_ERROR_REASONS = {
    "missing": "is required",
    "string_type": "must be a string",
    "string_too_short": "is not allowed to be empty",
    "model_type": "must be of type object",
    "model_attributes_type": "must be of type object",
    "dict_type": "must be of type object",
    "int_type": "must be a number",
    "int_parsing": "must be a number",
    "json_invalid": "must be valid JSON",
}
_LOCATION_ROOTS = frozenset({"body", "path", "query", "header", "cookie"})


def first_error_message(errors: Sequence[Mapping[str, Any]]) -> str:
    """Describe the first validation error as ``"<field>" <reason>``."""

    if not errors:
        return "Invalid request"
    error = errors[0]
    location = [str(part) for part in error.get("loc", ())]
    if location and location[0] in _LOCATION_ROOTS:
        location = location[1:]
    if error["type"] == "json_invalid":
        location = []
    path = ".".join(location) or "value"
    reason = _ERROR_REASONS.get(error["type"], error.get("msg", "is invalid"))
    return f'"{path}" {reason}'


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
