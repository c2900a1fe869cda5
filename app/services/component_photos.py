"""Assignments of photos to named frontend components."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import AppError, ErrorKind
from app.models import ComponentPhoto, Photo

ALREADY_ASSIGNED = "photo is already assigned to this component"
ASSIGNMENT_NOT_FOUND = "Component photo not found"


class ComponentPhotoService:
    def __init__(self, session: Session, logger: logging.Logger) -> None:
        self.session = session
        self.logger = logger

    def assign(
        self,
        component_name: str,
        photo_id: int,
        order: int = 0,
        props: dict[str, Any] | None = None,
    ) -> ComponentPhoto:
        """Attach a photo to a component. A (component, photo) pair may exist only once."""
        if self.session.get(Photo, photo_id) is None:
            raise AppError(ErrorKind.NOT_FOUND, "Photo not found")
        if self._exists(component_name, photo_id):
            raise AppError(ErrorKind.CONFLICT, ALREADY_ASSIGNED)

        assignment = ComponentPhoto(
            component_name=component_name,
            photo_id=photo_id,
            order=order,
            props=props or {},
        )
        try:
            self.session.add(assignment)
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise AppError(ErrorKind.CONFLICT, ALREADY_ASSIGNED) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.exception(
                "Failed to assign photo: component=%s photo_id=%s", component_name, photo_id
            )
            raise AppError(ErrorKind.INTERNAL) from e
        self.session.refresh(assignment)
        self.logger.info(
            "Photo assigned: component=%s photo_id=%s id=%s",
            component_name,
            photo_id,
            assignment.id,
        )
        return assignment

    def update(
        self,
        assignment_id: int,
        order: int | None = None,
        props: dict[str, Any] | None = None,
    ) -> ComponentPhoto:
        assignment = self._get(assignment_id)
        if order is None and props is None:
            return assignment
        if order is not None:
            assignment.order = order
        if props is not None:
            assignment.props = props
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.exception("Failed to update component photo: id=%s", assignment_id)
            raise AppError(ErrorKind.INTERNAL) from e
        self.session.refresh(assignment)
        return assignment

    def remove(self, assignment_id: int) -> None:
        assignment = self._get(assignment_id)
        try:
            self.session.delete(assignment)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.exception("Failed to remove component photo: id=%s", assignment_id)
            raise AppError(ErrorKind.INTERNAL) from e
        self.logger.info("Photo unassigned: id=%s", assignment_id)

    def list_by_component(self, component_name: str) -> list[ComponentPhoto]:
        """Assignments for one component in display order, each with its photo loaded."""
        return (
            self.session.query(ComponentPhoto)
            .filter(ComponentPhoto.component_name == component_name)
            .order_by(ComponentPhoto.order.asc(), ComponentPhoto.id.asc())
            .all()
        )

    def list_by_photo(self, photo_id: int) -> list[ComponentPhoto]:
        return (
            self.session.query(ComponentPhoto)
            .filter(ComponentPhoto.photo_id == photo_id)
            .order_by(ComponentPhoto.component_name.asc())
            .all()
        )

    def _get(self, assignment_id: int) -> ComponentPhoto:
        assignment = self.session.get(ComponentPhoto, assignment_id)
        if assignment is None:
            raise AppError(ErrorKind.NOT_FOUND, ASSIGNMENT_NOT_FOUND)
        return assignment

    def _exists(self, component_name: str, photo_id: int) -> bool:
        return (
            self.session.query(ComponentPhoto.id)
            .filter(
                ComponentPhoto.component_name == component_name,
                ComponentPhoto.photo_id == photo_id,
            )
            .first()
            is not None
        )
