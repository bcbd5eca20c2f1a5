"""
Unified Error Handling System

Provides centralized, consistent error handling across the application.

Usage:
    from workload_app.error_handlers import handle_errors
    from workload_app.error_handlers.exceptions import ValidationException

    @bp.route('/endpoint')
    @handle_errors
    def my_endpoint():
        if not valid:
            raise ValidationException('Invalid data')
        return jsonify({'success': True})
"""
from .exceptions import (
    AppException,
    ValidationException,
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    DatabaseException
)
from .decorators import handle_errors, with_db_transaction
from .logging import setup_logging, register_error_handlers


__all__ = [
    # Exceptions
    'AppException',
    'ValidationException',
    'AuthenticationException',
    'AuthorizationException',
    'ResourceNotFoundException',
    'DatabaseException',
    # Decorators
    'handle_errors',
    'with_db_transaction',
    # App setup
    'setup_logging',
    'register_error_handlers',
]
