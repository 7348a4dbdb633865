from typing import Any, Dict, Iterable, List, Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

REQUEST_LOCATIONS = ("body", "path", "query", "header", "cookie")


class BaseCustomException(Exception):
    """Base class for custom exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code
        self.headers = headers
        super().__init__(self.message)


class ValidationError(BaseCustomException):
    """Exception for validation errors, carrying a list of field errors"""

    def __init__(
        self,
        errors: Optional[List[Dict[str, Any]]] = None,
        message: str = "Validation failed",
        error_code: Optional[str] = None
    ):
        self.errors = errors or []
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"errors": self.errors},
            error_code=error_code or "VALIDATION_ERROR"
        )


class NotFoundError(BaseCustomException):
    """Exception for resource not found errors"""

    def __init__(
        self,
        message: str = "Resource not found",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code=error_code or "NOT_FOUND_ERROR"
        )


class AuthenticationError(BaseCustomException):
    """Exception for authentication errors"""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code=error_code or "AUTHENTICATION_ERROR",
            headers={"WWW-Authenticate": "Bearer"}
        )


def field_error(
    path: str,
    msg: str,
    value: Any = None,
    location: str = "body"
) -> Dict[str, Any]:
    """Build a single field error entry"""
    error = {"type": "field", "msg": msg, "path": path, "location": location}
    if value is not None:
        error["value"] = value
    return error


def format_validation_errors(
    errors: Iterable[Dict[str, Any]],
    location: str = "body"
) -> List[Dict[str, Any]]:
    """Convert pydantic error dicts into the API's field error list"""
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        error_location = location
        if loc and loc[0] in REQUEST_LOCATIONS:
            error_location = loc.pop(0)

        value = None
        if error.get("type") != "missing":
            value = error.get("input")

        formatted.append(field_error(
            path=".".join(str(part) for part in loc),
            msg=error.get("msg", "Invalid value"),
            value=value,
            location=error_location
        ))
    return jsonable_encoder(formatted)


def create_error_response(exception: BaseCustomException) -> Dict[str, Any]:
    """Create the JSON body for a custom exception"""
    if isinstance(exception, ValidationError):
        return {"errors": exception.errors}
    return {"error": exception.message}


async def custom_exception_handler(request: Request, exc: BaseCustomException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc),
        headers=exc.headers
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.warning(f"{request.method} {request.url.path} -> 400: {len(errors)} validation error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors}
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error in {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the API's error handlers on an application"""
    app.add_exception_handler(BaseCustomException, custom_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
