"""Shared builders for tests: in-memory SQLite sessions and fast auth primitives."""

import logging
from datetime import timedelta

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import PasswordHasher, TokenManager
from app.models import Base

# Long enough for HS256 without key-length warnings.
TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"
# Minimum bcrypt cost keeps the suite fast.
TEST_BCRYPT_ROUNDS = 4

test_logger = logging.getLogger("aton.tests")


def make_sessionmaker() -> sessionmaker:
    """
    Fresh in-memory database with all tables created.

    StaticPool keeps one connection so every session (and the TestClient
    worker threads) sees the same in-memory database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def make_session() -> Session:
    return make_sessionmaker()()


def make_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


def make_token_manager(ttl: timedelta = timedelta(hours=24), **kwargs: object) -> TokenManager:
    return TokenManager(secret=TEST_SECRET, algorithm="HS256", ttl=ttl, **kwargs)
