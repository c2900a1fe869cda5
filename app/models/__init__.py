"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.component_photo import ComponentPhoto
from app.models.photo import Photo
from app.models.user import User

__all__ = ["Base", "ComponentPhoto", "Photo", "User"]
