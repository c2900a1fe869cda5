"""Assign photos to frontend components. Reading a component's photos is public."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_component_photo_service
from app.api.v1.auth import get_current_user
from app.schemas.common import MessageResponse
from app.schemas.photo import (
    AssignPhotoRequest,
    ComponentPhotoListResponse,
    ComponentPhotoResponse,
    UpdateComponentPhotoRequest,
)
from app.services.component_photos import ComponentPhotoService

router = APIRouter(dependencies=[Depends(get_current_user)])
components_router = APIRouter()


@router.post("", response_model=MessageResponse, status_code=201)
def assign_photo(
    body: AssignPhotoRequest,
    assignments: Annotated[ComponentPhotoService, Depends(get_component_photo_service)],
) -> MessageResponse:
    assignments.assign(
        body.component_name,
        body.photo_id,
        order=body.order,
        props=body.props.model_dump(exclude_none=True),
    )
    return MessageResponse(message="Photo assigned to component successfully")


@router.put("/{assignment_id}", response_model=MessageResponse)
def update_assignment(
    assignment_id: int,
    body: UpdateComponentPhotoRequest,
    assignments: Annotated[ComponentPhotoService, Depends(get_component_photo_service)],
) -> MessageResponse:
    assignments.update(
        assignment_id,
        order=body.order,
        props=body.props.model_dump(exclude_none=True) if body.props is not None else None,
    )
    return MessageResponse(message="Component photo updated successfully")


@router.delete("/{assignment_id}", response_model=MessageResponse)
def remove_assignment(
    assignment_id: int,
    assignments: Annotated[ComponentPhotoService, Depends(get_component_photo_service)],
) -> MessageResponse:
    assignments.remove(assignment_id)
    return MessageResponse(message="Photo removed from component successfully")


@components_router.get("/{component_name}/photos", response_model=ComponentPhotoListResponse)
def list_component_photos(
    component_name: str,
    assignments: Annotated[ComponentPhotoService, Depends(get_component_photo_service)],
) -> ComponentPhotoListResponse:
    """Photos of one component in display order. Used by the public gallery."""
    rows = assignments.list_by_component(component_name)
    return ComponentPhotoListResponse(data=[ComponentPhotoResponse.model_validate(a) for a in rows])
