"""
Validation utilities for the Workload Capacity Service
Provides reusable parsing and validation helpers for API endpoints

Helpers raise ValidationException so @handle_errors turns them into 400s.
"""
import re
from datetime import datetime, date
from typing import Any, Dict, List, Optional

from workload_app.error_handlers.exceptions import ValidationException


def validate_date_param(date_str: str, param_name: str = 'date') -> date:
    """
    Validate and parse date parameter from string.

    Args:
        date_str: Date string in YYYY-MM-DD format
        param_name: Name of parameter for error messages (default: 'date')

    Returns:
        date: Parsed date object

    Raises:
        ValidationException: If date format is invalid

    Examples:
        >>> validate_date_param('2025-10-15')
        datetime.date(2025, 10, 15)
    """
    if not isinstance(date_str, str):
        raise ValidationException(f"{param_name} is required (YYYY-MM-DD)")
    try:
        return datetime.strptime(date_str, '%Y-%m-%d').date()
    except ValueError:
        raise ValidationException(
            f"Invalid {param_name} format. Use YYYY-MM-DD (e.g., 2025-10-15)"
        )


def validate_optional_date_param(date_str: Optional[str], param_name: str = 'date') -> Optional[date]:
    """Like validate_date_param, but None or an empty string yields None."""
    if date_str is None or date_str == '':
        return None
    return validate_date_param(date_str, param_name)


def validate_required_fields(data: Dict[str, Any], required_fields: List[str]) -> None:
    """
    Validate that all required fields are present and non-empty in request data.

    Raises:
        ValidationException: If any required field is missing
    """
    missing = [field for field in required_fields if not data.get(field)]
    if missing:
        raise ValidationException(
            f"Missing required fields: {', '.join(missing)}",
            details={'missing': missing}
        )


def parse_id_list(raw: Optional[str]) -> Optional[List[str]]:
    """
    Split a comma separated query parameter into IDs.

    Returns None when the parameter is absent. Entries are kept as given,
    including empty ones, so the caller can reject a malformed list.

    Examples:
        >>> parse_id_list('u1,u2')
        ['u1', 'u2']
        >>> parse_id_list('u1,,u2')
        ['u1', '', 'u2']
    """
    if raw is None:
        return None
    return [part.strip() for part in raw.split(',')]


def sanitize_request_data(data: str) -> str:
    """
    Remove sensitive data from request strings for safe logging.

    Examples:
        >>> sanitize_request_data('{"password": "secret123"}')
        '{"password": "[REDACTED]"}'
    """
    for field in ('password', 'token', 'api_key', 'secret', 'credential'):
        data = re.sub(rf'("{field}"\s*:\s*")[^"]*(")', r'\1[REDACTED]\2', data, flags=re.IGNORECASE)
    return data
