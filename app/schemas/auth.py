"""Request/response schemas for auth and user endpoints."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from app.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN, USERNAME_MIN_LEN
from app.schemas.common import CamelModel


class LoginRequest(CamelModel):
    """Credentials for login."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Username"
    )
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class LoginResponse(CamelModel):
    """JWT access token returned after successful login."""

    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., ge=1, description="Token lifetime in seconds")


class CreateUserRequest(CamelModel):
    """New admin account. Password minimum length is checked against settings."""

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)
    email: EmailStr | None = None

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username must not be blank")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_to_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ChangePasswordRequest(CamelModel):
    """Body for POST /user/change-password (oldPassword, newPassword)."""

    old_password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)
    new_password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class UserResponse(CamelModel):
    """Public view of a user. Never includes the password hash."""

    id: int
    username: str
    email: str | None = None
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CurrentUser(CamelModel):
    """Authenticated identity (from token claims) for dependency injection."""

    id: int
    username: str
    role: str
