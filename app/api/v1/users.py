"""Endpoints for the signed-in user."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_auth_service
from app.api.v1.auth import get_current_user, validate_new_password
from app.core.config import Settings, get_settings
from app.schemas.auth import ChangePasswordRequest, CurrentUser, UserResponse
from app.services.auth import AuthService

router = APIRouter()


@router.get("/me", response_model=CurrentUser)
def read_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Identity carried by the bearer token."""
    return current_user


@router.post("/change-password", response_model=UserResponse)
def change_password(
    body: ChangePasswordRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserResponse:
    """
    Change the current user's password. The old password must verify.
    Existing tokens stay valid until they expire; log in again to get a fresh one.
    """
    validate_new_password(body.new_password, settings)
    user = auth.change_password(current_user.id, body.old_password, body.new_password)
    return UserResponse.model_validate(user)
