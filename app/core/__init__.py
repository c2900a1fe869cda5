"""Core configuration, database, errors, logging and security primitives."""

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.errors import AppError, ErrorKind

__all__ = ["AppError", "ErrorKind", "get_settings", "settings", "get_db"]
