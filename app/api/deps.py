"""FastAPI dependencies that build services for one request."""

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import AppError, ErrorKind
from app.core.security import PasswordHasher, TokenManager
from app.services.auth import AuthService
from app.services.component_photos import ComponentPhotoService
from app.services.photos import PhotoService
from app.services.storage import StorageService
from app.services.user_store import UserStore


def get_logger(request: Request) -> logging.Logger:
    """The application logger created by the app factory."""
    return request.app.state.logger


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().BCRYPT_ROUNDS)


@lru_cache
def get_token_manager() -> TokenManager:
    settings = get_settings()
    return TokenManager(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        ttl=timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
        leeway=timedelta(seconds=settings.JWT_LEEWAY_SECONDS),
    )


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    logger: Annotated[logging.Logger, Depends(get_logger)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenManager, Depends(get_token_manager)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return AuthService(
        UserStore(db),
        hasher,
        tokens,
        logger,
        reject_unchanged_password=settings.REJECT_UNCHANGED_PASSWORD,
        email_unique=settings.EMAIL_UNIQUE,
    )


def get_photo_service(
    db: Annotated[Session, Depends(get_db)],
    logger: Annotated[logging.Logger, Depends(get_logger)],
) -> PhotoService:
    return PhotoService(db, logger)


def get_component_photo_service(
    db: Annotated[Session, Depends(get_db)],
    logger: Annotated[logging.Logger, Depends(get_logger)],
) -> ComponentPhotoService:
    return ComponentPhotoService(db, logger)


def get_storage_service(request: Request) -> StorageService:
    """Storage built at startup; raises STORAGE_UNAVAILABLE when it could not be built."""
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise AppError(ErrorKind.STORAGE_UNAVAILABLE)
    return storage
