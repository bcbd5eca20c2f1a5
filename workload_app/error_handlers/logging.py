"""
Error handling and logging utilities for the Workload Capacity Service
Provides centralized logging setup and global HTTP error handlers
"""
import logging
import traceback
from datetime import datetime, timezone
from flask import jsonify, request
import os


def setup_logging(app):
    """Configure application logging"""
    log_level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO').upper())
    log_file = app.config.get('LOG_FILE', 'workload.log')

    # Make log file path absolute if it's not
    if not os.path.isabs(log_file):
        basedir = os.path.abspath(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))
        log_file = os.path.join(basedir, log_file)

    log_dir = os.path.dirname(log_file)
    os.makedirs(log_dir, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    # App logger and the package logger used by services
    app.logger.setLevel(log_level)
    app.logger.addHandler(file_handler)
    app.logger.addHandler(console_handler)

    package_logger = logging.getLogger('workload_app')
    package_logger.setLevel(log_level)
    if not package_logger.handlers:
        package_logger.addHandler(file_handler)
        package_logger.addHandler(console_handler)

    # Configure werkzeug logger (Flask's request logger)
    werkzeug_logger = logging.getLogger('werkzeug')
    werkzeug_logger.setLevel(log_level)

    return app.logger


def _error_response(error_name, message, status_code, error_id=None):
    """Build a JSON error body"""
    body = {
        'error': error_name,
        'message': message,
        'status_code': status_code
    }
    if error_id:
        body['error_id'] = error_id
    return jsonify(body), status_code


def register_error_handlers(app):
    """Register global error handlers for the Flask app"""

    @app.errorhandler(400)
    def bad_request_error(error):
        """Handle 400 Bad Request errors"""
        app.logger.warning(f"Bad request from {request.remote_addr}: {request.url}")
        return _error_response('Bad Request', 'The request could not be understood by the server', 400)

    @app.errorhandler(401)
    def unauthorized_error(error):
        """Handle 401 Unauthorized errors"""
        app.logger.warning(f"Unauthorized access attempt from {request.remote_addr}: {request.url}")
        return _error_response('Unauthorized', 'Authentication required', 401)

    @app.errorhandler(403)
    def forbidden_error(error):
        """Handle 403 Forbidden errors"""
        app.logger.warning(f"Forbidden access attempt from {request.remote_addr}: {request.url}")
        return _error_response('Forbidden', 'Access denied', 403)

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 Not Found errors"""
        app.logger.info(f"404 Not Found: {request.url} from {request.remote_addr}")
        return _error_response('Not Found', 'The requested resource was not found', 404)

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        """Handle 405 Method Not Allowed errors"""
        app.logger.warning(f"Method not allowed: {request.method} {request.url} from {request.remote_addr}")
        return _error_response(
            'Method Not Allowed',
            f'The {request.method} method is not allowed for this endpoint',
            405
        )

    @app.errorhandler(429)
    def rate_limited_error(error):
        """Handle 429 Too Many Requests errors"""
        app.logger.warning(f"Rate limit exceeded by {request.remote_addr}: {request.url}")
        return _error_response('Too Many Requests', 'Rate limit exceeded', 429)

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 Internal Server Error"""
        from workload_app.utils.validators import sanitize_request_data

        error_id = datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S_%f')
        app.logger.error(f"Internal Server Error [{error_id}]: {str(error)}")
        app.logger.error(f"Traceback [{error_id}]: {traceback.format_exc()}")

        # Log request details for debugging (SANITIZED to prevent credential leakage)
        app.logger.error(f"Request details [{error_id}]: {request.method} {request.url}")
        request_data = sanitize_request_data(request.get_data(as_text=True)[:1000])
        app.logger.error(f"Request data [{error_id}]: {request_data}")

        return _error_response('Internal Server Error', 'An unexpected error occurred', 500, error_id)
