"""
Application error types.

Accessors raise these; the handlers in ``eventboard.middleware.error_handler``
turn them into JSON responses with a status code and a readable message.
"""

from typing import Optional


class ErrorCategory:
    """Error categories for structured error handling"""
    AUTHENTICATION = "authentication_error"
    NOT_FOUND = "not_found_error"
    CONFLICT = "conflict_error"
    CREDENTIAL = "credential_error"
    DATABASE = "database_error"
    INTERNAL = "internal_error"


class AppError(Exception):
    """Base application error with structured information"""

    def __init__(
        self,
        message: str,
        category: str = ErrorCategory.INTERNAL,
        status_code: int = 500,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.category = category
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class UnauthenticatedError(AppError):
    """Missing or unknown session, or rejected credentials"""
    def __init__(self, message: str = "Not authenticated"):
        super().__init__(
            message=message,
            category=ErrorCategory.AUTHENTICATION,
            status_code=401,
        )


class NotFoundError(AppError):
    """Entity absent, or present but outside the caller's scope"""
    def __init__(self, entity: str, details: Optional[dict] = None):
        super().__init__(
            message=f"{entity} not found",
            category=ErrorCategory.NOT_FOUND,
            status_code=404,
            details=details,
        )


class ConflictError(AppError):
    """A unique value is already taken"""
    def __init__(self, message: str):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFLICT,
            status_code=409,
        )


class CredentialError(AppError):
    """Password hashing or verification failed"""
    def __init__(self, message: str):
        super().__init__(
            message=message,
            category=ErrorCategory.CREDENTIAL,
            status_code=500,
        )


class StorageError(AppError):
    """Any database failure; carries the driver's message"""
    def __init__(self, message: str):
        super().__init__(
            message=f"Database operation failed: {message}",
            category=ErrorCategory.DATABASE,
            status_code=500,
        )
