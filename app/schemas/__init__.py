"""Pydantic request/response schemas."""

from app.schemas.auth import (
    ChangePasswordRequest,
    CreateUserRequest,
    CurrentUser,
    LoginRequest,
    LoginResponse,
    UserResponse,
)
from app.schemas.common import CamelModel, MessageResponse
from app.schemas.health import HealthResponse
from app.schemas.photo import (
    AssignPhotoRequest,
    ComponentPhotoListResponse,
    ComponentPhotoProps,
    ComponentPhotoResponse,
    PhotoCreateRequest,
    PhotoListResponse,
    PhotoResponse,
    PhotoUpdateRequest,
    ReorderRequest,
    UpdateComponentPhotoRequest,
)
from app.schemas.storage import UploadTokenRequest, UploadTokenResponse

__all__ = [
    "AssignPhotoRequest",
    "CamelModel",
    "ChangePasswordRequest",
    "ComponentPhotoListResponse",
    "ComponentPhotoProps",
    "ComponentPhotoResponse",
    "CreateUserRequest",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PhotoCreateRequest",
    "PhotoListResponse",
    "PhotoResponse",
    "PhotoUpdateRequest",
    "ReorderRequest",
    "UpdateComponentPhotoRequest",
    "UploadTokenRequest",
    "UploadTokenResponse",
    "UserResponse",
]
