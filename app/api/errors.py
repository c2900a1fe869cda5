"""Maps AppError kinds to HTTP responses. Internal detail never reaches the client."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import DEFAULT_MESSAGES, AppError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.USER_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.PASSWORD_UNCHANGED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.HASHING_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.SIGNING_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.EXPIRED_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UPDATE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.STORAGE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def install_error_handlers(app: FastAPI, logger: logging.Logger) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
        detail = exc.message
        if exc.is_internal:
            logger.error(
                "Internal error: %s %s kind=%s message=%s",
                request.method,
                request.url.path,
                exc.kind.value,
                exc.message,
                exc_info=exc.__cause__ or exc,
            )
            detail = DEFAULT_MESSAGES[ErrorKind.INTERNAL]
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return JSONResponse(status_code=status_code, content={"detail": detail}, headers=headers)
