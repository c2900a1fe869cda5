"""Tests for app.services.photos: CRUD, filtering, ordering and batch reorder."""

import unittest

from app.core.errors import AppError, ErrorKind
from app.models import ComponentPhoto, Photo
from app.services.photos import (
    IMAGE_URL_EMPTY,
    NO_FIELDS_TO_UPDATE,
    TITLE_EMPTY,
    PhotoFilters,
    PhotoService,
    parse_order_by,
)
from tests.support import make_session, test_logger


def _photo_data(title: str = "Sunset", **kwargs: object) -> dict:
    """Minimal create payload with snake_case keys."""
    data = {"title": title, "image_url": f"http://cdn/{title}.jpg"}
    data.update(kwargs)
    return data


class PhotoServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.session = make_session()
        self.photos = PhotoService(self.session, test_logger)

    def tearDown(self) -> None:
        self.session.close()

    def assertKind(self, kind: ErrorKind, fn, *args: object) -> AppError:
        with self.assertRaises(AppError) as ctx:
            fn(*args)
        self.assertEqual(ctx.exception.kind, kind)
        return ctx.exception


class TestCreateAndGet(PhotoServiceTestCase):
    def test_create_defaults_to_draft(self) -> None:
        photo = self.photos.create(_photo_data(category="nature", is_featured=True))
        self.assertIsNotNone(photo.id)
        self.assertEqual(photo.status, "draft")
        self.assertEqual(photo.category, "nature")
        self.assertTrue(photo.is_featured)
        self.assertEqual(photo.display_order, 0)
        self.assertEqual(self.photos.get(photo.id).title, "Sunset")

    def test_blank_title_rejected(self) -> None:
        err = self.assertKind(ErrorKind.BAD_REQUEST, self.photos.create, _photo_data(title="  "))
        self.assertEqual(err.message, TITLE_EMPTY)

    def test_blank_image_url_rejected(self) -> None:
        err = self.assertKind(
            ErrorKind.BAD_REQUEST, self.photos.create, _photo_data(image_url="")
        )
        self.assertEqual(err.message, IMAGE_URL_EMPTY)
        self.assertEqual(self.session.query(Photo).count(), 0)

    def test_get_missing_is_not_found(self) -> None:
        self.assertKind(ErrorKind.NOT_FOUND, self.photos.get, 404)


class TestList(PhotoServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.a = self.photos.create(_photo_data("a", category="city", display_order=3))
        self.b = self.photos.create(_photo_data("b", category="nature", display_order=1))
        self.c = self.photos.create(
            _photo_data("c", category="nature", display_order=2, is_featured=True)
        )
        self.photos.update(self.c.id, {"status": "published"})

    def titles(self, filters: PhotoFilters) -> list[str]:
        rows, _total = self.photos.list_photos(filters)
        return [p.title for p in rows]

    def test_default_order_is_display_order(self) -> None:
        rows, total = self.photos.list_photos(PhotoFilters())
        self.assertEqual([p.title for p in rows], ["b", "c", "a"])
        self.assertEqual(total, 3)

    def test_filters(self) -> None:
        self.assertEqual(self.titles(PhotoFilters(category="nature")), ["b", "c"])
        self.assertEqual(self.titles(PhotoFilters(status="published")), ["c"])
        self.assertEqual(self.titles(PhotoFilters(is_featured=True)), ["c"])
        self.assertEqual(self.titles(PhotoFilters(is_featured=False)), ["b", "a"])

    def test_pagination_keeps_unpaginated_total(self) -> None:
        rows, total = self.photos.list_photos(PhotoFilters(limit=1, offset=1))
        self.assertEqual([p.title for p in rows], ["c"])
        self.assertEqual(total, 3)

    def test_order_by_descending(self) -> None:
        self.assertEqual(self.titles(PhotoFilters(order_by="title desc")), ["c", "b", "a"])

    def test_order_by_rejects_unknown_column(self) -> None:
        self.assertKind(ErrorKind.BAD_REQUEST, parse_order_by, "password_hash asc")
        self.assertKind(ErrorKind.BAD_REQUEST, parse_order_by, "title sideways")
        self.assertKind(ErrorKind.BAD_REQUEST, parse_order_by, "title; drop table photos")


class TestUpdate(PhotoServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.photo = self.photos.create(_photo_data(description="old"))

    def test_partial_update_changes_only_given_fields(self) -> None:
        updated = self.photos.update(self.photo.id, {"title": "New", "status": "published"})
        self.assertEqual(updated.title, "New")
        self.assertEqual(updated.status, "published")
        self.assertEqual(updated.description, "old")

    def test_empty_update_rejected(self) -> None:
        err = self.assertKind(ErrorKind.BAD_REQUEST, self.photos.update, self.photo.id, {})
        self.assertEqual(err.message, NO_FIELDS_TO_UPDATE)

    def test_missing_photo_is_not_found(self) -> None:
        self.assertKind(ErrorKind.NOT_FOUND, self.photos.update, 999, {"title": "x"})

    def test_blank_title_rejected(self) -> None:
        self.assertKind(ErrorKind.BAD_REQUEST, self.photos.update, self.photo.id, {"title": " "})

    def test_unknown_status_rejected(self) -> None:
        self.assertKind(
            ErrorKind.BAD_REQUEST, self.photos.update, self.photo.id, {"status": "archived"}
        )


class TestDelete(PhotoServiceTestCase):
    def test_delete_removes_component_assignments(self) -> None:
        photo = self.photos.create(_photo_data())
        self.session.add(ComponentPhoto(component_name="hero", photo_id=photo.id, order=0))
        self.session.commit()

        self.photos.delete(photo.id)

        self.assertEqual(self.session.query(Photo).count(), 0)
        self.assertEqual(self.session.query(ComponentPhoto).count(), 0)

    def test_delete_missing_is_not_found(self) -> None:
        self.assertKind(ErrorKind.NOT_FOUND, self.photos.delete, 999)


class TestDisplayOrder(PhotoServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.a = self.photos.create(_photo_data("a", display_order=0))
        self.b = self.photos.create(_photo_data("b", display_order=1))

    def orders(self) -> dict[str, int]:
        self.session.expire_all()
        return {p.title: p.display_order for p in self.session.query(Photo).all()}

    def test_batch_update(self) -> None:
        self.photos.batch_update_display_order([(self.a.id, 5), (self.b.id, 2)])
        self.assertEqual(self.orders(), {"a": 5, "b": 2})

    def test_single_update(self) -> None:
        self.photos.update_display_order(self.b.id, 9)
        self.assertEqual(self.orders(), {"a": 0, "b": 9})

    def test_unknown_id_rolls_back_whole_batch(self) -> None:
        self.assertKind(
            ErrorKind.NOT_FOUND,
            self.photos.batch_update_display_order,
            [(self.a.id, 7), (999, 1)],
        )
        self.assertEqual(self.orders(), {"a": 0, "b": 1})

    def test_empty_batch_is_noop(self) -> None:
        self.photos.batch_update_display_order([])
        self.assertEqual(self.orders(), {"a": 0, "b": 1})


if __name__ == "__main__":
    unittest.main()
