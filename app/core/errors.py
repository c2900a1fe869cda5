"""Application error type: one exception class tagged with a closed set of kinds."""

from enum import Enum


class ErrorKind(str, Enum):
    """Every failure the services can report. Match on kind, not on identity."""

    INVALID_CREDENTIALS = "invalid_credentials"
    USER_EXISTS = "user_exists"
    PASSWORD_UNCHANGED = "password_unchanged"
    HASHING_FAILURE = "hashing_failure"
    SIGNING_FAILURE = "signing_failure"
    EXPIRED_TOKEN = "expired_token"
    INVALID_TOKEN = "invalid_token"
    UPDATE_FAILURE = "update_failure"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORAGE_UNAVAILABLE = "storage_unavailable"
    INTERNAL = "internal"


# Kinds that are never attributable to the caller; their detail stays server-side.
INTERNAL_KINDS = frozenset(
    {
        ErrorKind.HASHING_FAILURE,
        ErrorKind.SIGNING_FAILURE,
        ErrorKind.UPDATE_FAILURE,
        ErrorKind.INTERNAL,
    }
)

DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_CREDENTIALS: "Invalid username or password",
    ErrorKind.USER_EXISTS: "User already exists",
    ErrorKind.PASSWORD_UNCHANGED: "New password must differ from the old password",
    ErrorKind.HASHING_FAILURE: "Failed to hash password",
    ErrorKind.SIGNING_FAILURE: "Failed to sign token",
    ErrorKind.EXPIRED_TOKEN: "Token has expired",
    ErrorKind.INVALID_TOKEN: "Invalid token",
    ErrorKind.UPDATE_FAILURE: "Failed to update password",
    ErrorKind.BAD_REQUEST: "Invalid request",
    ErrorKind.NOT_FOUND: "Resource not found",
    ErrorKind.CONFLICT: "Resource already exists",
    ErrorKind.STORAGE_UNAVAILABLE: "Storage service not configured",
    ErrorKind.INTERNAL: "Internal server error",
}


class AppError(Exception):
    """Raised by services; the boundary maps `kind` to an HTTP status."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    @property
    def is_internal(self) -> bool:
        return self.kind in INTERNAL_KINDS

    def __repr__(self) -> str:
        return f"AppError(kind={self.kind.value!r}, message={self.message!r})"
