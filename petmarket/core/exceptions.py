# petmarket/core/exceptions.py

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """Standardized error codes for the application."""

    # Client input errors
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    INVALID_PRODUCT_ID = "INVALID_PRODUCT_ID"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Auth errors
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"

    # Lookup errors
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PET_NOT_FOUND = "PET_NOT_FOUND"

    # System errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"


STATUS_CODE_MAP = {
    ErrorCode.INVALID_EMAIL_FORMAT: 400,
    ErrorCode.EMAIL_ALREADY_EXISTS: 400,
    ErrorCode.INVALID_PASSWORD: 400,
    ErrorCode.INVALID_PRODUCT_ID: 400,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.USER_NOT_FOUND: 404,
    ErrorCode.PET_NOT_FOUND: 404,
    ErrorCode.RATE_LIMIT_EXCEEDED: 429,
    ErrorCode.INTERNAL_SERVER_ERROR: 500,
}


class PetMarketError(Exception):
    """Base exception for all Pet Market application errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_details: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.user_message = user_message
        self.technical_details = technical_details
        self.context = context or {}
        super().__init__(self.user_message)

    @property
    def status_code(self) -> int:
        return STATUS_CODE_MAP.get(self.code, 400)

    def to_response(self) -> Dict[str, Any]:
        """Convert to API response format."""
        return {
            "message": self.user_message,
            "error": {
                "code": self.code.value,
            },
        }


class InvalidEmailFormatError(PetMarketError):
    def __init__(self, email: str):
        super().__init__(
            code=ErrorCode.INVALID_EMAIL_FORMAT,
            user_message="Invalid email format",
            context={"email": email},
        )


class EmailAlreadyExistsError(PetMarketError):
    def __init__(self, email: str):
        super().__init__(
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            user_message="Email already exists",
            context={"email": email},
        )


class InvalidPasswordError(PetMarketError):
    """Raised when password is invalid."""

    def __init__(self, message: str = "Password wrong."):
        super().__init__(code=ErrorCode.INVALID_PASSWORD, user_message=message)


class InvalidProductIdError(PetMarketError):
    def __init__(self, product_id: Any):
        super().__init__(
            code=ErrorCode.INVALID_PRODUCT_ID,
            user_message="Invalid product ID",
            context={"product_id": str(product_id)},
        )


class AuthenticationError(PetMarketError):
    """Raised for missing, malformed, expired or badly signed tokens."""

    def __init__(self, message: str = "Unauthorized", technical_details: Optional[str] = None):
        super().__init__(
            code=ErrorCode.UNAUTHORIZED,
            user_message=message,
            technical_details=technical_details,
        )


class ForbiddenError(PetMarketError):
    def __init__(self, message: str = "Forbidden"):
        super().__init__(code=ErrorCode.FORBIDDEN, user_message=message)


class UserNotFoundError(PetMarketError):
    """Raised when a user is not found."""

    def __init__(self, message: str = "User not found"):
        super().__init__(code=ErrorCode.USER_NOT_FOUND, user_message=message)


class PetNotFoundError(PetMarketError):
    def __init__(self, pet_id: str):
        super().__init__(
            code=ErrorCode.PET_NOT_FOUND,
            user_message="Pet not found.",
            context={"pet_id": pet_id},
        )


class ServerError(PetMarketError):
    """Generic failure. The technical details are logged, never returned."""

    def __init__(self, technical_details: Optional[str] = None):
        super().__init__(
            code=ErrorCode.INTERNAL_SERVER_ERROR,
            user_message="Server error",
            technical_details=technical_details,
        )
