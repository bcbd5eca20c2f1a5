"""
Routes package for the Workload Capacity Service
Centralizes all route blueprints
"""
from .auth import (
    is_authenticated,
    get_current_user,
    require_authentication
)
from .api_workload import api_workload_bp
from .api_absences import api_absences_bp
from .health import health_bp

__all__ = [
    'api_workload_bp',
    'api_absences_bp',
    'health_bp',
    'is_authenticated',
    'get_current_user',
    'require_authentication'
]
