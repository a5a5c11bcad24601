"""
Custom exceptions for the Founder Flow API.
Every error leaves the API as {"success": false, "error": ..., "details": ...}.
"""
import logging
import traceback
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class FounderFlowException(Exception):
    """Base exception for Founder Flow"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "An error occurred", details: Any = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class UnauthorizedError(FounderFlowException):
    """No valid session"""
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(FounderFlowException):
    """Authenticated, but not allowed"""
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Forbidden - Admin access only"):
        super().__init__(message)


class ValidationError(FounderFlowException):
    """Malformed or out-of-range input"""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Validation failed", field: Optional[str] = None):
        if field:
            message = f"Validation failed for field '{field}': {message}"
        super().__init__(message)


class NotFoundError(FounderFlowException):
    """Resource not found"""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str = "Resource", resource_id: Optional[str] = None, message: Optional[str] = None):
        if message is None:
            message = f"{resource} not found"
            if resource_id:
                message = f"{resource} with id '{resource_id}' not found"
        super().__init__(message)


class ExternalServiceError(FounderFlowException):
    """Database or model-provider call failed"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "External service call failed", details: Any = None):
        super().__init__(message, details)


def error_body(message: str, details: Any = None, stack: Optional[str] = None) -> dict:
    body = {"success": False, "error": message}
    if details is not None:
        body["details"] = details
    if stack:
        body["stack"] = stack
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """Attach JSON error renderers to the app."""

    def _dev_mode() -> bool:
        settings = getattr(app.state, "settings", None)
        return bool(settings and settings.DEV_MODE)

    @app.exception_handler(FounderFlowException)
    async def handle_app_error(request: Request, exc: FounderFlowException):
        stack = None
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})")
            if _dev_mode():
                stack = "".join(traceback.format_exception(exc))
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.message, exc.details, stack),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Invalid request", jsonable_errors(exc)),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        stack = "".join(traceback.format_exception(exc)) if _dev_mode() else None
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error", str(exc), stack),
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
