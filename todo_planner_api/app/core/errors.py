"""
Domain errors and their HTTP rendering.

Services and guards raise subclasses of ``ServiceError``; each carries
the HTTP status it maps to.  ``create_app`` registers
``service_error_handler`` so that any such error short‑circuits the
request and is returned as ``{"error": "<message>"}``.
"""

import logging
import traceback

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse


logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors reported to the client."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    # Duplicate usernames are reported as 400, not 409.
    status_code = status.HTTP_400_BAD_REQUEST


class BadRequestError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.info(
        "%s %s rejected with %d: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return error_response(exc.message, exc.status_code)


class UncaughtExceptionMiddleware(BaseHTTPMiddleware):
    """Log unhandled exceptions and answer with a JSON 500."""

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.error("Uncaught exception: %s\n%s", e, traceback.format_exc())
            return error_response("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)
