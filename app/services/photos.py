"""Photo CRUD and display ordering."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import AppError, ErrorKind
from app.models import ComponentPhoto, Photo
from app.models.photo import PHOTO_STATUS_DRAFT, PHOTO_STATUSES

PHOTO_NOT_FOUND = "Photo not found"
TITLE_EMPTY = "Photo title cannot be empty"
IMAGE_URL_EMPTY = "Photo image URL cannot be empty"
NO_FIELDS_TO_UPDATE = "No fields to update"

# Columns clients may sort by; anything else is rejected rather than passed to SQL.
SORTABLE_COLUMNS = {
    "display_order": Photo.display_order,
    "created_at": Photo.created_at,
    "updated_at": Photo.updated_at,
    "title": Photo.title,
    "id": Photo.id,
}
DEFAULT_ORDER_BY = "display_order asc"
MAX_PAGE_SIZE = 500

UPDATABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "image_url",
        "thumbnail_url",
        "category",
        "location",
        "is_featured",
        "display_order",
        "status",
    }
)


@dataclass
class PhotoFilters:
    """Query options for listing photos. Empty strings mean "no filter"."""

    status: str = ""
    category: str = ""
    is_featured: bool | None = None
    limit: int = 0
    offset: int = 0
    order_by: str = DEFAULT_ORDER_BY


def parse_order_by(order_by: str) -> Any:
    """Turn "column [asc|desc]" into an ORDER BY clause. Raises BAD_REQUEST otherwise."""
    parts = (order_by or DEFAULT_ORDER_BY).strip().split()
    if not parts or len(parts) > 2:
        raise AppError(ErrorKind.BAD_REQUEST, f"Invalid order_by: {order_by!r}")
    column = SORTABLE_COLUMNS.get(parts[0].lower())
    direction = parts[1].lower() if len(parts) == 2 else "asc"
    if column is None or direction not in ("asc", "desc"):
        raise AppError(ErrorKind.BAD_REQUEST, f"Invalid order_by: {order_by!r}")
    return column.desc() if direction == "desc" else column.asc()


class PhotoService:
    """Photo operations over one request-scoped session."""

    def __init__(self, session: Session, logger: logging.Logger) -> None:
        self.session = session
        self.logger = logger

    def create(self, data: dict[str, Any]) -> Photo:
        title = data.get("title") or ""
        image_url = data.get("image_url") or ""
        if not title.strip():
            raise AppError(ErrorKind.BAD_REQUEST, TITLE_EMPTY)
        if not image_url.strip():
            raise AppError(ErrorKind.BAD_REQUEST, IMAGE_URL_EMPTY)

        photo = Photo(
            title=title,
            description=data.get("description") or "",
            image_url=image_url,
            thumbnail_url=data.get("thumbnail_url") or "",
            category=data.get("category") or "",
            location=data.get("location") or "",
            is_featured=bool(data.get("is_featured", False)),
            display_order=int(data.get("display_order") or 0),
            status=PHOTO_STATUS_DRAFT,
        )
        self._commit(lambda: self.session.add(photo), "create photo")
        self.session.refresh(photo)
        self.logger.info("Photo created: id=%s title=%s", photo.id, photo.title)
        return photo

    def get(self, photo_id: int) -> Photo:
        photo = self.session.get(Photo, photo_id)
        if photo is None:
            raise AppError(ErrorKind.NOT_FOUND, PHOTO_NOT_FOUND)
        return photo

    def list_photos(self, filters: PhotoFilters) -> tuple[list[Photo], int]:
        """Return one page of photos and the count of all rows matching the filters."""
        order_clause = parse_order_by(filters.order_by)
        query = self.session.query(Photo)
        if filters.status:
            query = query.filter(Photo.status == filters.status)
        if filters.category:
            query = query.filter(Photo.category == filters.category)
        if filters.is_featured is not None:
            query = query.filter(Photo.is_featured == filters.is_featured)

        try:
            total = query.count()
            query = query.order_by(order_clause, Photo.id.asc())
            if filters.limit > 0:
                query = query.limit(min(filters.limit, MAX_PAGE_SIZE))
            if filters.offset > 0:
                query = query.offset(filters.offset)
            photos = query.all()
        except SQLAlchemyError as e:
            self.logger.exception("Photo list query failed")
            raise AppError(ErrorKind.INTERNAL) from e
        return photos, total

    def update(self, photo_id: int, changes: dict[str, Any]) -> Photo:
        """Apply a partial update. `changes` holds only the fields the client sent."""
        changes = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v is not None}
        if not changes:
            raise AppError(ErrorKind.BAD_REQUEST, NO_FIELDS_TO_UPDATE)

        photo = self.get(photo_id)

        if "title" in changes and not str(changes["title"]).strip():
            raise AppError(ErrorKind.BAD_REQUEST, TITLE_EMPTY)
        if "image_url" in changes and not str(changes["image_url"]).strip():
            raise AppError(ErrorKind.BAD_REQUEST, IMAGE_URL_EMPTY)
        if "status" in changes and changes["status"] not in PHOTO_STATUSES:
            raise AppError(
                ErrorKind.BAD_REQUEST,
                f"Photo status must be one of: {', '.join(PHOTO_STATUSES)}",
            )

        def apply() -> None:
            for name, value in changes.items():
                setattr(photo, name, value)

        self._commit(apply, f"update photo {photo_id}")
        self.session.refresh(photo)
        self.logger.info("Photo updated: id=%s fields=%s", photo_id, sorted(changes))
        return photo

    def delete(self, photo_id: int) -> None:
        """Delete a photo and its component assignments in one transaction."""
        photo = self.get(photo_id)

        def remove() -> None:
            self.session.query(ComponentPhoto).filter(
                ComponentPhoto.photo_id == photo_id
            ).delete(synchronize_session=False)
            self.session.delete(photo)

        self._commit(remove, f"delete photo {photo_id}")
        self.logger.info("Photo deleted: id=%s", photo_id)

    def update_display_order(self, photo_id: int, order: int) -> None:
        self.batch_update_display_order([(photo_id, order)])

    def batch_update_display_order(self, orders: Sequence[tuple[int, int]]) -> None:
        """
        Set display_order for many photos atomically.
        Any unknown id fails the whole batch with NOT_FOUND and nothing changes.
        """
        if not orders:
            return
        try:
            for photo_id, order in orders:
                updated = (
                    self.session.query(Photo)
                    .filter(Photo.id == photo_id)
                    .update({Photo.display_order: order}, synchronize_session=False)
                )
                if updated == 0:
                    self.session.rollback()
                    raise AppError(ErrorKind.NOT_FOUND, f"{PHOTO_NOT_FOUND}: {photo_id}")
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.exception("Display order update failed")
            raise AppError(ErrorKind.INTERNAL) from e
        self.logger.info("Display order updated: count=%s", len(orders))

    def _commit(self, work: Callable[[], None], action: str) -> None:
        try:
            work()
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.exception("Failed to %s", action)
            raise AppError(ErrorKind.INTERNAL) from e
