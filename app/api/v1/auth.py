"""Login, bootstrap user creation and the bearer-token auth dependency."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.api.deps import get_auth_service, get_token_manager
from app.core.config import Settings, get_settings
from app.core.security import TokenManager
from app.services.auth import AuthService
from app.schemas.auth import (
    CreateUserRequest,
    CurrentUser,
    LoginRequest,
    LoginResponse,
    UserResponse,
)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def validate_new_password(password: str, settings: Settings) -> None:
    """Enforce the configured minimum length on passwords being set."""
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters.",
        )


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    token = auth.login(body.username, body.password)
    return LoginResponse(
        token=token,
        token_type="bearer",
        expires_in=int(auth.tokens.ttl.total_seconds()),
    )


@router.post("/create-user", response_model=UserResponse, status_code=201)
def create_user(
    body: CreateUserRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserResponse:
    """
    Create an admin user. Public, so disabled unless CREATE_USER_ENDPOINT_ENABLED
    is set; use `python -m app.scripts.create_user` for normal bootstrap.
    """
    if not settings.CREATE_USER_ENDPOINT_ENABLED:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User creation endpoint is disabled.",
        )
    validate_new_password(body.password, settings)
    user = auth.create_user(body.username, body.password, body.email)
    return UserResponse.model_validate(user)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenManager, Depends(get_token_manager)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the identity it carries.
    Raises 401 when missing; expired and invalid tokens are reported separately.
    No database lookup: the token is the only session state.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    claims = tokens.verify(credentials.credentials)
    return CurrentUser(id=claims.user_id, username=claims.username, role=claims.role)
