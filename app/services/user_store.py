"""Credential store: persistence of User rows. Uniqueness is enforced by the database."""

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import User


class UserStore:
    """Thin query layer over the users table. Callers own error mapping."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_username(self, username: str) -> User | None:
        return self.session.query(User).filter(User.username == username).first()

    def get_by_id(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def email_in_use(self, email: str) -> bool:
        count = (
            self.session.query(func.count(User.id))
            .filter(func.lower(User.email) == email.lower())
            .scalar()
        )
        return bool(count)

    def create(self, user: User) -> User:
        """
        Insert a user whose password_hash is already set.
        Raises sqlalchemy IntegrityError when the username is taken.
        """
        try:
            self.session.add(user)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        self.session.refresh(user)
        return user

    def update_password_hash(self, user_id: int, password_hash: str) -> int:
        """Update only the password_hash column. Returns the number of rows changed."""
        try:
            updated = (
                self.session.query(User)
                .filter(User.id == user_id)
                .update({User.password_hash: password_hash}, synchronize_session=False)
            )
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return updated
