"""
Utility modules for the Workload Capacity Service
"""
from .validators import (
    validate_date_param,
    validate_optional_date_param,
    validate_required_fields,
    parse_id_list,
    sanitize_request_data,
)

__all__ = [
    'validate_date_param',
    'validate_optional_date_param',
    'validate_required_fields',
    'parse_id_list',
    'sanitize_request_data',
]
