"""
Create an admin user (e.g. the first one). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [EMAIL]
Example:
  python -m app.scripts.create_user admin your-secure-password admin@example.com
"""
import argparse
import sys
from datetime import timedelta

from dotenv import load_dotenv

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import AppError
from app.core.logging_config import configure_logging
from app.core.security import USERNAME_MAX_LEN, PasswordHasher, TokenManager
from app.services.auth import AuthService
from app.services.user_store import UserStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Aton CMS admin user.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help="Password (at least PASSWORD_MIN_LENGTH chars)")
    parser.add_argument("email", nargs="?", default=None, help="Optional email address")
    args = parser.parse_args(argv)

    settings = get_settings()
    logger = configure_logging(settings)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if len(args.password) < settings.PASSWORD_MIN_LENGTH:
        print(
            f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters.",
            file=sys.stderr,
        )
        return 1

    db = SessionLocal()
    try:
        auth = AuthService(
            UserStore(db),
            PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
            TokenManager(
                secret=settings.JWT_SECRET.get_secret_value(),
                algorithm=settings.JWT_ALGORITHM,
                ttl=timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
            ),
            logger,
            reject_unchanged_password=settings.REJECT_UNCHANGED_PASSWORD,
            email_unique=settings.EMAIL_UNIQUE,
        )
        try:
            user = auth.create_user(username, args.password, args.email)
        except AppError as e:
            print(f"Could not create user '{username}': {e.message}", file=sys.stderr)
            return 1
        print(f"Created admin user '{user.username}' (id={user.id}).")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    load_dotenv()
    sys.exit(main())
