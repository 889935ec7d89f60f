# petmarket/core/error_handlers.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import traceback
import uuid

from .exceptions import PetMarketError, ErrorCode

logger = logging.getLogger(__name__)


def setup_error_handlers(app: FastAPI):
    """Set up global error handlers for the FastAPI application."""

    @app.exception_handler(PetMarketError)
    async def petmarket_error_handler(request: Request, exc: PetMarketError):
        """Handle custom Pet Market errors."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"Pet Market Error: {exc.code.value}",
            extra={
                "error_code": exc.code.value,
                "user_message": exc.user_message,
                "technical_details": exc.technical_details,
                "context": exc.context,
                "request_url": str(request.url),
                "request_method": request.method,
            }
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response()
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors as bad requests."""
        errors = []
        for error in exc.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            errors.append({
                "field": field_path,
                "message": error["msg"],
                "type": error["type"],
            })

        logger.warning(
            "Validation error",
            extra={
                "validation_errors": errors,
                "request_url": str(request.url),
                "request_method": request.method
            }
        )

        return JSONResponse(
            status_code=400,
            content={
                "message": "Invalid request",
                "error": {
                    "code": ErrorCode.VALIDATION_ERROR.value,
                    "details": errors
                }
            }
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle standard HTTP exceptions with consistent format."""
        logger.warning(
            f"HTTP Exception: {exc.status_code}",
            extra={
                "status_code": exc.status_code,
                "detail": exc.detail,
                "request_url": str(request.url),
                "request_method": request.method
            }
        )

        # The bearer scheme answers a missing header with "Not authenticated"
        message = "Unauthorized" if exc.status_code == 401 else exc.detail
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "message": message,
                "error": {"code": f"HTTP_{exc.status_code}"}
            },
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(f"Rate limit exceeded for {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=429,
            content={
                "message": "Too many requests. Please try again later.",
                "error": {"code": ErrorCode.RATE_LIMIT_EXCEEDED.value}
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions with proper logging."""
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            extra={
                "exception_type": type(exc).__name__,
                "request_url": str(request.url),
                "request_method": request.method,
                "traceback": traceback.format_exc()
            }
        )

        # Don't expose internal details
        return JSONResponse(
            status_code=500,
            content={
                "message": "Server error",
                "error": {"code": ErrorCode.INTERNAL_SERVER_ERROR.value}
            }
        )


# Middleware for request ID tracking
async def add_request_id_middleware(request: Request, call_next):
    """Add request ID for better error tracking."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response
