"""
Caller identity helpers
The signed Flask session carries the caller's user ID; issuing it is the job
of the login service in front of this application.
"""
from functools import wraps
from flask import session, current_app

from workload_app.error_handlers.exceptions import AuthenticationException
from workload_app.models import get_models


SESSION_USER_KEY = 'user_id'


def get_current_user():
    """
    Load the user attached to the current session

    Returns:
        User instance, or None when the session is anonymous or stale
    """
    user_id = session.get(SESSION_USER_KEY)
    if not user_id:
        return None

    db = current_app.extensions['sqlalchemy']
    user = db.session.get(get_models()['User'], user_id)
    if user is None:
        current_app.logger.info(f"Session references unknown user {user_id}")
    return user


def is_authenticated():
    """Check if the request carries a known user"""
    return get_current_user() is not None


def require_authentication():
    """Decorator to require an authenticated caller; combine with @handle_errors"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not is_authenticated():
                raise AuthenticationException('Authentication required')
            return f(*args, **kwargs)
        return decorated_function
    return decorator
