"""ORM model for admin users (credential store rows)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base

DEFAULT_ROLE = "admin"


class User(Base):
    """
    Admin account for JWT authentication.

    password_hash is opaque bcrypt text and is never serialized to clients.
    email uniqueness is enforced by the auth service when EMAIL_UNIQUE is set.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True, index=True)
    role = Column(String(32), nullable=False, default=DEFAULT_ROLE)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
