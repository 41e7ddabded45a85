"""
Error Taxonomy
Exceptions raised by services and the handlers that turn them into JSON responses
"""
from contextlib import contextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.log import get_logger

logger = get_logger(__name__)


class ServiceError(Exception):
    """Base error carrying the HTTP status it maps to"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class BadRequestError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class StorageError(InternalError):
    """Backing document could not be read, parsed or written"""


@contextmanager
def operation_guard(message: str):
    """Report any unexpected failure inside an operation as an InternalError"""
    try:
        yield
    except InternalError as e:
        cause = f"{e.message}: {e.details}" if e.details else e.message
        logger.error("operation_failed", operation=message, error=cause)
        raise InternalError(message, details=cause) from e
    except ServiceError:
        raise
    except Exception as e:
        logger.error("operation_failed", operation=message, error=str(e), exc_info=True)
        raise InternalError(message, details=str(e)) from e


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error("request_failed", path=request.url.path, error=exc.message, details=exc.details)
        else:
            logger.warning("request_rejected", path=request.url.path, status=exc.status_code, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )
