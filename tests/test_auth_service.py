"""Tests for app.services.auth against an in-memory database."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from app.core.errors import AppError, ErrorKind
from app.models import User
from app.services.auth import EMAIL_IN_USE_MESSAGE, AuthService
from app.services.user_store import UserStore
from tests.support import make_hasher, make_session, make_token_manager, test_logger


def _service(session, **kwargs: object) -> AuthService:
    """Build an AuthService over the given session with fast hashing."""
    return AuthService(
        UserStore(session),
        make_hasher(),
        make_token_manager(),
        test_logger,
        **kwargs,
    )


class AuthServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.session = make_session()
        self.auth = _service(self.session)

    def tearDown(self) -> None:
        self.session.close()

    def assertKind(self, kind: ErrorKind, fn, *args: object) -> AppError:
        with self.assertRaises(AppError) as ctx:
            fn(*args)
        self.assertEqual(ctx.exception.kind, kind)
        return ctx.exception

    def user_count(self) -> int:
        return self.session.query(User).count()


class TestAliceScenario(AuthServiceTestCase):
    """create -> login -> wrong login -> change password -> old fails, new works."""

    def test_full_lifecycle(self) -> None:
        alice = self.auth.create_user("alice", "Secret123", "alice@x.com")
        self.assertEqual(alice.role, "admin")
        self.assertEqual(alice.email, "alice@x.com")
        self.assertIsNotNone(alice.id)
        self.assertNotEqual(alice.password_hash, "Secret123")

        token = self.auth.login("alice", "Secret123")
        self.assertTrue(token)
        claims = self.auth.tokens.verify(token)
        self.assertEqual(claims.user_id, alice.id)
        self.assertEqual(claims.username, "alice")
        self.assertEqual(claims.role, "admin")

        self.assertKind(ErrorKind.INVALID_CREDENTIALS, self.auth.login, "alice", "wrong")

        self.auth.change_password(alice.id, "Secret123", "NewPass456")
        self.assertKind(ErrorKind.INVALID_CREDENTIALS, self.auth.login, "alice", "Secret123")
        self.assertTrue(self.auth.login("alice", "NewPass456"))


class TestLogin(AuthServiceTestCase):
    def test_unknown_user_and_wrong_password_are_indistinguishable(self) -> None:
        self.auth.create_user("alice", "Secret123", None)
        wrong_password = self.assertKind(
            ErrorKind.INVALID_CREDENTIALS, self.auth.login, "alice", "nope-nope"
        )
        no_such_user = self.assertKind(
            ErrorKind.INVALID_CREDENTIALS, self.auth.login, "mallory", "nope-nope"
        )
        self.assertEqual(wrong_password.message, no_such_user.message)
        self.assertEqual(str(wrong_password), str(no_such_user))

    def test_lookup_failure_is_internal(self) -> None:
        store = MagicMock()
        store.get_by_username.side_effect = OperationalError("SELECT", {}, Exception("down"))
        auth = AuthService(store, make_hasher(), make_token_manager(), test_logger)
        err = self.assertKind(ErrorKind.INTERNAL, auth.login, "alice", "Secret123")
        self.assertNotIn("SELECT", err.message)


class TestCreateUser(AuthServiceTestCase):
    def test_password_is_hashed_before_persisting(self) -> None:
        self.auth.create_user("alice", "Secret123", None)
        row = self.session.query(User).filter(User.username == "alice").one()
        self.assertNotEqual(row.password_hash, "Secret123")
        self.assertTrue(self.auth.hasher.verify(row.password_hash, "Secret123"))

    def test_duplicate_username_is_user_exists(self) -> None:
        self.auth.create_user("alice", "Secret123", None)
        self.assertKind(
            ErrorKind.USER_EXISTS, self.auth.create_user, "alice", "Other1234", None
        )
        self.assertEqual(self.user_count(), 1)

    def test_insert_race_is_remapped_to_user_exists(self) -> None:
        self.auth.create_user("alice", "Secret123", None)
        # Simulate losing the race: the pre-check sees nothing, the insert collides.
        self.auth.store.get_by_username = MagicMock(return_value=None)
        self.assertKind(
            ErrorKind.USER_EXISTS, self.auth.create_user, "alice", "Other1234", None
        )
        self.assertEqual(self.user_count(), 1)

    def test_duplicate_email_rejected_when_unique(self) -> None:
        self.auth.create_user("alice", "Secret123", "alice@x.com")
        err = self.assertKind(
            ErrorKind.USER_EXISTS, self.auth.create_user, "alice2", "Secret123", "ALICE@x.com"
        )
        self.assertEqual(err.message, EMAIL_IN_USE_MESSAGE)

    def test_duplicate_email_allowed_when_not_unique(self) -> None:
        auth = _service(self.session, email_unique=False)
        auth.create_user("alice", "Secret123", "shared@x.com")
        auth.create_user("bob", "Secret123", "shared@x.com")
        self.assertEqual(self.user_count(), 2)

    def test_blank_email_stored_as_null(self) -> None:
        user = self.auth.create_user("alice", "Secret123", "   ")
        self.assertIsNone(user.email)

    def test_store_failure_is_internal(self) -> None:
        store = MagicMock()
        store.get_by_username.return_value = None
        store.email_in_use.return_value = False
        store.create.side_effect = OperationalError("INSERT", {}, Exception("down"))
        auth = AuthService(store, make_hasher(), make_token_manager(), test_logger)
        self.assertKind(ErrorKind.INTERNAL, auth.create_user, "alice", "Secret123", None)


class TestChangePassword(AuthServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice = self.auth.create_user("alice", "Secret123", None)
        self.original_hash = self.alice.password_hash

    def stored_hash(self) -> str:
        self.session.expire_all()
        return self.session.query(User).filter(User.id == self.alice.id).one().password_hash

    def test_success_swaps_which_password_verifies(self) -> None:
        user = self.auth.change_password(self.alice.id, "Secret123", "NewPass456")
        self.assertEqual(user.id, self.alice.id)
        new_hash = self.stored_hash()
        self.assertFalse(self.auth.hasher.verify(new_hash, "Secret123"))
        self.assertTrue(self.auth.hasher.verify(new_hash, "NewPass456"))

    def test_wrong_old_password_changes_nothing(self) -> None:
        self.assertKind(
            ErrorKind.INVALID_CREDENTIALS,
            self.auth.change_password,
            self.alice.id,
            "wrong",
            "NewPass456",
        )
        self.assertEqual(self.stored_hash(), self.original_hash)

    def test_unknown_user_is_invalid_credentials(self) -> None:
        self.assertKind(
            ErrorKind.INVALID_CREDENTIALS,
            self.auth.change_password,
            9999,
            "Secret123",
            "NewPass456",
        )

    def test_unchanged_password_rejected_by_default(self) -> None:
        self.assertKind(
            ErrorKind.PASSWORD_UNCHANGED,
            self.auth.change_password,
            self.alice.id,
            "Secret123",
            "Secret123",
        )
        self.assertEqual(self.stored_hash(), self.original_hash)

    def test_unchanged_password_allowed_when_policy_off(self) -> None:
        auth = _service(self.session, reject_unchanged_password=False)
        auth.change_password(self.alice.id, "Secret123", "Secret123")
        new_hash = self.stored_hash()
        self.assertNotEqual(new_hash, self.original_hash)
        self.assertTrue(auth.hasher.verify(new_hash, "Secret123"))

    def test_persistence_failure_is_update_failure(self) -> None:
        self.auth.store.update_password_hash = MagicMock(
            side_effect=OperationalError("UPDATE", {}, Exception("down"))
        )
        err = self.assertKind(
            ErrorKind.UPDATE_FAILURE,
            self.auth.change_password,
            self.alice.id,
            "Secret123",
            "NewPass456",
        )
        self.assertTrue(err.is_internal)
        self.assertEqual(self.stored_hash(), self.original_hash)

    def test_no_row_updated_is_update_failure(self) -> None:
        self.auth.store.update_password_hash = MagicMock(return_value=0)
        self.assertKind(
            ErrorKind.UPDATE_FAILURE,
            self.auth.change_password,
            self.alice.id,
            "Secret123",
            "NewPass456",
        )


if __name__ == "__main__":
    unittest.main()
