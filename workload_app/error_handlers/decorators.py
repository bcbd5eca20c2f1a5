"""
Error handling decorators

Provides decorators for consistent error handling across endpoints.
"""
from functools import wraps
from flask import jsonify, current_app
from datetime import datetime, timezone
from sqlalchemy.exc import SQLAlchemyError

from .exceptions import AppException, DatabaseException


def handle_errors(f):
    """
    Universal error handler decorator - use on all API endpoints

    Provides:
    - Consistent JSON error responses
    - Automatic logging with error IDs
    - Exception type hierarchy support

    Usage:
        @api_workload_bp.route('')
        @handle_errors
        def get_workload():
            if not valid:
                raise ValidationException('Invalid input')
            return jsonify(results)
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        try:
            return f(*args, **kwargs)

        except AppException as e:
            # Custom exceptions - already formatted
            current_app.logger.warning(
                f"{e.error_type} in {f.__name__}: {e.message}",
                extra={'details': e.details} if e.details else {}
            )
            return jsonify(e.to_dict()), e.status_code

        except Exception as e:
            # Unexpected errors - log with ID and full traceback
            error_id = datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S_%f')

            current_app.logger.error(
                f"Unexpected error [{error_id}] in {f.__name__}: {str(e)}",
                exc_info=True
            )

            # Don't expose internal error details
            return jsonify({
                'error': 'InternalError',
                'message': 'An unexpected error occurred',
                'error_id': error_id,
                'status_code': 500
            }), 500

    return decorated


def with_db_transaction(f):
    """
    Decorator to wrap function in database transaction

    Automatically commits on success or rolls back on error. Database
    errors are re-raised as DatabaseException so @handle_errors answers with
    a JSON 500.

    Usage:
        @handle_errors
        @with_db_transaction
        def create_absence():
            db.session.add(absence)
            # Automatically committed on success
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        db = current_app.extensions['sqlalchemy']

        try:
            result = f(*args, **kwargs)
            db.session.commit()
            return result
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Transaction failed in {f.__name__}: {e}")
            raise DatabaseException('Database operation failed') from e
        except Exception:
            db.session.rollback()
            raise  # Re-raise for error handler

    return decorated
