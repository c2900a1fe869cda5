"""ORM model for gallery photos."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Integer,
    String,
    Text,
    func,
)

from app.models.base import Base

PHOTO_STATUS_DRAFT = "draft"
PHOTO_STATUS_PUBLISHED = "published"
PHOTO_STATUSES = (PHOTO_STATUS_DRAFT, PHOTO_STATUS_PUBLISHED)


class Photo(Base):
    """A gallery photo. image_url points at object storage; status gates publication."""

    __tablename__ = "photos"
    __table_args__ = (
        CheckConstraint(
            "status IN ('draft', 'published')",
            name="ck_photos_status",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    image_url = Column(String(500), nullable=False)
    thumbnail_url = Column(String(500), nullable=False, default="")
    category = Column(String(50), nullable=False, default="", index=True)
    location = Column(String(200), nullable=False, default="")
    is_featured = Column(Boolean, nullable=False, default=False)
    display_order = Column(Integer, nullable=False, default=0, index=True)
    status = Column(String(20), nullable=False, default=PHOTO_STATUS_DRAFT, index=True)
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
