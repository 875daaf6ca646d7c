"""Translation of domain failures into ``{"message": ...}`` responses.

Route handlers wrap their repository calls in :func:`translate_errors`; the
handlers registered by :func:`register_error_handlers` turn the resulting
:class:`ApiError` (and anything that escaped) into JSON.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mis_backend.shared import ErrorKind, MisError

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized"
INTERNAL_ERROR_MESSAGE = "Internal server error"

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ApiError(Exception):
    """An HTTP status paired with the message shown to the caller."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


def status_for(kind: ErrorKind) -> int:
    return _STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


@contextmanager
def translate_errors(operation: str, *, failure_message: str) -> Iterator[None]:
    """Map failures raised inside the block onto :class:`ApiError`.

    Caller-side kinds keep their own message. Internal and unclassified
    failures are logged under ``operation`` and answered with
    ``failure_message`` only.
    """

    try:
        yield
    except ApiError:
        raise
    except MisError as exc:
        code = status_for(exc.kind)
        if exc.kind is ErrorKind.UNAUTHORIZED:
            raise ApiError(code, UNAUTHORIZED_MESSAGE) from exc
        if code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "%s failed: %s",
                operation,
                exc.message,
                exc_info=exc,
                extra={"operation": operation},
            )
            raise ApiError(code, failure_message) from exc
        raise ApiError(code, exc.message) from exc
    except Exception as exc:
        logger.exception("%s failed", operation, extra={"operation": operation})
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, failure_message) from exc


def describe_validation_errors(errors: Sequence[Any]) -> str:
    """Render the first validation error as a single caller-facing sentence."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    if location:
        return f"Invalid value for '{'.'.join(location)}': {first.get('msg')}"
    return str(first.get("msg", "Invalid request"))


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code, content={"message": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": describe_validation_errors(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s",
            request.url.path,
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )


__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "UNAUTHORIZED_MESSAGE",
    "ApiError",
    "describe_validation_errors",
    "register_error_handlers",
    "status_for",
    "translate_errors",
]
