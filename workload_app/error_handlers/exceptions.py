"""
Custom exception hierarchy for type-safe error handling

Provides a structured exception hierarchy that maps to HTTP status codes
and enables consistent error responses across the application.

Usage:
    from workload_app.error_handlers.exceptions import ValidationException

    def parse_user_ids(raw):
        if not raw:
            raise ValidationException('userIds must not be empty')

Exception Hierarchy:
    AppException (base)
    ├── ValidationException (400)
    ├── AuthenticationException (401)
    ├── AuthorizationException (403)
    ├── ResourceNotFoundException (404)
    └── DatabaseException (500)
"""
from typing import Dict, Any, Optional


class AppException(Exception):
    """
    Base exception for all application errors

    Attributes:
        status_code: HTTP status code for the error
        error_type: String identifier for the error type
        message: Human-readable error message
        details: Additional context about the error
    """
    status_code = 500
    error_type = 'ApplicationError'

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        if status_code:
            self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to JSON-serializable dictionary

        Returns:
            Dictionary suitable for JSON response
        """
        result = {
            'error': self.error_type,
            'message': self.message,
            'status_code': self.status_code
        }

        if self.details:
            result.update(self.details)

        return result

    def __str__(self) -> str:
        return f"{self.error_type}: {self.message}"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}('{self.message}', status_code={self.status_code})>"


class ValidationException(AppException):
    """
    Validation errors (HTTP 400)

    Raised when request data fails validation checks, e.g. an empty or
    malformed list of user IDs.
    """
    status_code = 400
    error_type = 'ValidationError'


class AuthenticationException(AppException):
    """
    Authentication errors (HTTP 401)

    Raised when no caller identity is attached to the request.
    """
    status_code = 401
    error_type = 'AuthenticationError'


class AuthorizationException(AppException):
    """
    Authorization errors (HTTP 403)

    Raised when the caller is known but asks for data outside their scope.

    Example:
        >>> if not caller.can_view_others():
        ...     raise AuthorizationException('Not allowed to view other users')
    """
    status_code = 403
    error_type = 'AuthorizationError'


class ResourceNotFoundException(AppException):
    """
    Resource not found (HTTP 404)

    Example:
        >>> absence = db.session.get(Absence, absence_id)
        >>> if not absence:
        ...     raise ResourceNotFoundException(f'Absence {absence_id} not found')
    """
    status_code = 404
    error_type = 'NotFound'


class DatabaseException(AppException):
    """
    Database operation errors (HTTP 500)

    Raised by @with_db_transaction when a commit fails.
    """
    status_code = 500
    error_type = 'DatabaseError'
