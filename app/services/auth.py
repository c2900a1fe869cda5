"""Auth service: login, admin user creation and password change."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.errors import AppError, ErrorKind
from app.core.security import PasswordHasher, TokenManager
from app.models.user import DEFAULT_ROLE, User
from app.services.user_store import UserStore

EMAIL_IN_USE_MESSAGE = "User with this email already exists"


class AuthService:
    """
    Orchestrates the credential store, password hasher and token manager.

    Every call is independent; nothing is cached between calls. Login and
    password-change failures never reveal whether the account exists.
    """

    def __init__(
        self,
        store: UserStore,
        hasher: PasswordHasher,
        tokens: TokenManager,
        logger: logging.Logger,
        *,
        reject_unchanged_password: bool = True,
        email_unique: bool = True,
    ) -> None:
        self.store = store
        self.hasher = hasher
        self.tokens = tokens
        self.logger = logger
        self.reject_unchanged_password = reject_unchanged_password
        self.email_unique = email_unique

    def login(self, username: str, password: str) -> str:
        """Return a signed access token for valid credentials."""
        try:
            user = self.store.get_by_username(username)
        except SQLAlchemyError as e:
            self.logger.exception("Login lookup failed: username=%s", username)
            raise AppError(ErrorKind.INTERNAL) from e

        if user is None or not self.hasher.verify(user.password_hash, password):
            self.logger.warning("Login failed: username=%s", username)
            raise AppError(ErrorKind.INVALID_CREDENTIALS)

        token = self.tokens.issue(user.id, user.username, user.role)
        self.logger.info("Login succeeded: user_id=%s username=%s", user.id, user.username)
        return token

    def create_user(self, username: str, password: str, email: str | None = None) -> User:
        """Create an admin user. The password is hashed here, before the store sees it."""
        email = email.strip() if email and email.strip() else None
        try:
            if self.store.get_by_username(username) is not None:
                raise AppError(ErrorKind.USER_EXISTS)
            if self.email_unique and email and self.store.email_in_use(email):
                raise AppError(ErrorKind.USER_EXISTS, EMAIL_IN_USE_MESSAGE)
        except SQLAlchemyError as e:
            self.logger.exception("User existence check failed: username=%s", username)
            raise AppError(ErrorKind.INTERNAL) from e

        user = User(
            username=username,
            password_hash=self.hasher.hash(password),
            email=email,
            role=DEFAULT_ROLE,
        )
        try:
            created = self.store.create(user)
        except IntegrityError as e:
            # Lost a race with a concurrent insert of the same username.
            self.logger.warning("User insert hit unique constraint: username=%s", username)
            raise AppError(ErrorKind.USER_EXISTS) from e
        except SQLAlchemyError as e:
            self.logger.exception("User insert failed: username=%s", username)
            raise AppError(ErrorKind.INTERNAL) from e

        self.logger.info("User created: user_id=%s username=%s", created.id, created.username)
        return created

    def change_password(self, user_id: int, old_password: str, new_password: str) -> User:
        """
        Replace the stored hash after verifying the old password.

        Failure kinds: INVALID_CREDENTIALS (unknown user or wrong old password),
        PASSWORD_UNCHANGED (policy), HASHING_FAILURE, UPDATE_FAILURE.
        Nothing is written unless every check passes.
        """
        try:
            user = self.store.get_by_id(user_id)
        except SQLAlchemyError as e:
            self.logger.exception("Password change lookup failed: user_id=%s", user_id)
            raise AppError(ErrorKind.INTERNAL) from e

        if user is None or not self.hasher.verify(user.password_hash, old_password):
            self.logger.warning("Password change rejected: user_id=%s", user_id)
            raise AppError(ErrorKind.INVALID_CREDENTIALS)

        if self.reject_unchanged_password and old_password == new_password:
            raise AppError(ErrorKind.PASSWORD_UNCHANGED)

        new_hash = self.hasher.hash(new_password)

        try:
            updated = self.store.update_password_hash(user.id, new_hash)
        except SQLAlchemyError as e:
            self.logger.exception("Password update failed: user_id=%s", user_id)
            raise AppError(ErrorKind.UPDATE_FAILURE) from e
        if updated != 1:
            self.logger.error("Password update touched %s rows: user_id=%s", updated, user_id)
            raise AppError(ErrorKind.UPDATE_FAILURE)

        self.logger.info("Password changed: user_id=%s", user_id)
        return user
