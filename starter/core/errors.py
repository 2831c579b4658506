import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


class AppError(Exception):
    """Base class for errors rendered to the caller as ``{"error": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message or GENERIC_ERROR_MESSAGE


class ConfigurationError(AppError):
    """The process is missing a required credential. Operator-facing."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ValidationError(AppError):
    """Caller-supplied input broke an amount or currency rule."""

    status_code = status.HTTP_400_BAD_REQUEST


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ProviderError(AppError):
    """The upstream payment provider call failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "; ".join(messages) or "Validation error"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR_MESSAGE},
    )
