"""Request/response schemas for photos and component assignments."""

from datetime import datetime
from typing import Any, Literal

from pydantic import ConfigDict, Field

from app.schemas.common import CamelModel

TITLE_MAX_LENGTH = 200
URL_MAX_LENGTH = 500

PhotoStatus = Literal["draft", "published"]


class PhotoResponse(CamelModel):
    """A gallery photo as returned to clients."""

    id: int
    title: str
    description: str = ""
    image_url: str
    thumbnail_url: str = ""
    category: str = ""
    location: str = ""
    is_featured: bool = False
    display_order: int = 0
    status: PhotoStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PhotoCreateRequest(CamelModel):
    """Body for POST /photos. Blank title or image URL is rejected by the service."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = ""
    image_url: str = Field(..., max_length=URL_MAX_LENGTH)
    thumbnail_url: str = Field(default="", max_length=URL_MAX_LENGTH)
    category: str = Field(default="", max_length=50)
    location: str = Field(default="", max_length=200)
    is_featured: bool = False
    display_order: int = 0


class PhotoUpdateRequest(CamelModel):
    """Body for PUT /photos/{id}. Only fields present in the body are changed."""

    title: str | None = Field(default=None, max_length=TITLE_MAX_LENGTH)
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=URL_MAX_LENGTH)
    thumbnail_url: str | None = Field(default=None, max_length=URL_MAX_LENGTH)
    category: str | None = Field(default=None, max_length=50)
    location: str | None = Field(default=None, max_length=200)
    is_featured: bool | None = None
    display_order: int | None = None
    status: PhotoStatus | None = None

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent with a non-null value."""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class PhotoListResponse(CamelModel):
    """Response for GET /photos: one page plus the unpaginated total."""

    data: list[PhotoResponse]
    total: int = Field(..., ge=0)


class DisplayOrderItem(CamelModel):
    id: int
    display_order: int


class ReorderRequest(CamelModel):
    """Body for POST /photos/reorder."""

    orders: list[DisplayOrderItem] = Field(..., max_length=1000)


class ComponentPhotoProps(CamelModel):
    """Display props for a photo inside a component; unknown keys are kept."""

    model_config = ConfigDict(extra="allow")

    caption: str | None = None
    alt: str | None = None
    link: str | None = None


class AssignPhotoRequest(CamelModel):
    """Body for POST /component-photos."""

    component_name: str = Field(..., min_length=1, max_length=100)
    photo_id: int = Field(..., ge=1)
    order: int = 0
    props: ComponentPhotoProps = Field(default_factory=ComponentPhotoProps)


class UpdateComponentPhotoRequest(CamelModel):
    """Body for PUT /component-photos/{id}."""

    order: int | None = None
    props: ComponentPhotoProps | None = None


class ComponentPhotoResponse(CamelModel):
    id: int
    component_name: str
    photo_id: int
    order: int
    props: ComponentPhotoProps
    photo: PhotoResponse | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ComponentPhotoListResponse(CamelModel):
    data: list[ComponentPhotoResponse]
