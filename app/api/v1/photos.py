"""Photo CRUD, reordering and the component assignments of a photo. Admin only."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_component_photo_service, get_photo_service
from app.api.v1.auth import get_current_user
from app.schemas.auth import CurrentUser
from app.schemas.common import MessageResponse
from app.schemas.photo import (
    ComponentPhotoListResponse,
    ComponentPhotoResponse,
    PhotoCreateRequest,
    PhotoListResponse,
    PhotoResponse,
    PhotoUpdateRequest,
    ReorderRequest,
)
from app.services.component_photos import ComponentPhotoService
from app.services.photos import DEFAULT_ORDER_BY, PhotoFilters, PhotoService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=PhotoListResponse)
def list_photos(
    photos: Annotated[PhotoService, Depends(get_photo_service)],
    status: str = "",
    category: str = "",
    featured: bool | None = None,
    limit: Annotated[int, Query(ge=0)] = 0,
    offset: Annotated[int, Query(ge=0)] = 0,
    order_by: str = DEFAULT_ORDER_BY,
) -> PhotoListResponse:
    """
    List photos with optional filters (status, category, featured) and
    pagination (limit, offset). order_by is "column [asc|desc]" over
    display_order, created_at, updated_at, title or id.
    """
    filters = PhotoFilters(
        status=status,
        category=category,
        is_featured=featured,
        limit=limit,
        offset=offset,
        order_by=order_by,
    )
    rows, total = photos.list_photos(filters)
    return PhotoListResponse(
        data=[PhotoResponse.model_validate(p) for p in rows],
        total=total,
    )


@router.post("", response_model=PhotoResponse, status_code=201)
def create_photo(
    body: PhotoCreateRequest,
    photos: Annotated[PhotoService, Depends(get_photo_service)],
) -> PhotoResponse:
    """Create a photo in draft status."""
    return PhotoResponse.model_validate(photos.create(body.model_dump()))


@router.post("/reorder", response_model=MessageResponse)
def reorder_photos(
    body: ReorderRequest,
    photos: Annotated[PhotoService, Depends(get_photo_service)],
) -> MessageResponse:
    """Set display order for several photos at once; all or nothing."""
    photos.batch_update_display_order([(item.id, item.display_order) for item in body.orders])
    return MessageResponse(message="Display order updated successfully")


@router.get("/{photo_id}", response_model=PhotoResponse)
def get_photo(
    photo_id: int,
    photos: Annotated[PhotoService, Depends(get_photo_service)],
) -> PhotoResponse:
    return PhotoResponse.model_validate(photos.get(photo_id))


@router.put("/{photo_id}", response_model=PhotoResponse)
def update_photo(
    photo_id: int,
    body: PhotoUpdateRequest,
    photos: Annotated[PhotoService, Depends(get_photo_service)],
) -> PhotoResponse:
    """Partial update: only fields present in the body change."""
    return PhotoResponse.model_validate(photos.update(photo_id, body.changes()))


@router.delete("/{photo_id}", response_model=MessageResponse)
def delete_photo(
    photo_id: int,
    photos: Annotated[PhotoService, Depends(get_photo_service)],
) -> MessageResponse:
    """Delete a photo together with its component assignments."""
    photos.delete(photo_id)
    return MessageResponse(message="Photo deleted successfully")


@router.get("/{photo_id}/components", response_model=ComponentPhotoListResponse)
def list_photo_components(
    photo_id: int,
    assignments: Annotated[ComponentPhotoService, Depends(get_component_photo_service)],
) -> ComponentPhotoListResponse:
    """Component assignments of one photo."""
    return ComponentPhotoListResponse(
        data=[ComponentPhotoResponse.model_validate(a) for a in assignments.list_by_photo(photo_id)]
    )
