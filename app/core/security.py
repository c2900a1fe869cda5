"""Password hashing and JWT creation/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.errors import AppError, ErrorKind

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12
# bcrypt only looks at the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

DEFAULT_TOKEN_TTL = timedelta(hours=24)

# Claims every token must carry; decode rejects tokens missing any of them.
REQUIRED_CLAIMS = ["sub", "username", "role", "iat", "exp"]


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """Salted bcrypt hashing with a fixed work factor."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self.rounds = rounds

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. Do not store plain passwords."""
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(_password_bytes(plain_password), salt).decode("utf-8")
        except (ValueError, TypeError) as e:
            raise AppError(ErrorKind.HASHING_FAILURE) from e

    def verify(self, hashed: str, plain_password: str) -> bool:
        """Verify a plain password against a stored hash. Never raises."""
        if not hashed or plain_password is None:
            return False
        try:
            return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    user_id: int
    username: str
    role: str
    issued_at: datetime
    expires_at: datetime


class TokenManager:
    """Issues and verifies signed, time-limited bearer tokens. Stateless."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        leeway: timedelta = timedelta(0),
    ) -> None:
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl
        self.leeway = leeway

    def issue(
        self,
        user_id: int,
        username: str,
        role: str,
        now: datetime | None = None,
    ) -> str:
        """Create a JWT carrying user id, username, role, iat and exp."""
        issued = int((now or datetime.now(UTC)).timestamp())
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "username": username,
            "role": role,
            "iat": issued,
            "exp": issued + int(self.ttl.total_seconds()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self.algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
            raise AppError(ErrorKind.SIGNING_FAILURE) from e

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token; return its claims.
        Raises AppError(EXPIRED_TOKEN) past expiry, AppError(INVALID_TOKEN) otherwise.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                leeway=self.leeway,
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise AppError(ErrorKind.EXPIRED_TOKEN) from e
        except jwt.PyJWTError as e:
            raise AppError(ErrorKind.INVALID_TOKEN) from e
        return _claims_from_payload(payload)


def _claims_from_payload(payload: dict[str, Any]) -> TokenClaims:
    username = payload.get("username")
    role = payload.get("role")
    if not isinstance(username, str) or not isinstance(role, str):
        raise AppError(ErrorKind.INVALID_TOKEN)
    try:
        user_id = int(payload["sub"])
        issued_at = datetime.fromtimestamp(int(payload["iat"]), UTC)
        expires_at = datetime.fromtimestamp(int(payload["exp"]), UTC)
    except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
        raise AppError(ErrorKind.INVALID_TOKEN) from e
    return TokenClaims(
        user_id=user_id,
        username=username,
        role=role,
        issued_at=issued_at,
        expires_at=expires_at,
    )
