"""ORM model for the component/photo association (many-to-many with payload)."""

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from app.models.base import Base


class ComponentPhoto(Base):
    """
    Assigns a photo to a named frontend component, with a per-component order
    and free-form display props (caption, alt, link, ...).

    Component names are not validated; the frontend decides which name it reads.
    """

    __tablename__ = "component_photos"
    __table_args__ = (
        UniqueConstraint("component_name", "photo_id", name="uk_component_photo"),
        Index("idx_component_order", "component_name", "order"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    component_name = Column(String(100), nullable=False)
    photo_id = Column(
        Integer,
        ForeignKey("photos.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    order = Column("order", Integer, nullable=False, default=0)
    props = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=dict)
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

    photo = relationship("Photo", lazy="joined")
