"""
Flask application factory.

This module implements the application factory pattern for creating
Flask application instances with different configurations.
"""

from flask import Flask, request
from flask_wtf.csrf import generate_csrf
import os

from .extensions import db, migrate, csrf, limiter
from .config import get_config


def create_app(config_name=None):
    """
    Application factory function.

    Args:
        config_name: Configuration name (development, testing, production)
                    If None, determined from environment

    Returns:
        Flask application instance
    """
    app = Flask(__name__)

    # Correct IP and scheme handling behind reverse proxies
    from werkzeug.middleware.proxy_fix import ProxyFix
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    # Load configuration
    config_class = get_config(config_name, validate=True)
    app.config.from_object(config_class)

    # Ensure instance directory exists
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    os.makedirs(os.path.join(basedir, "instance"), exist_ok=True)

    # Update database URI to use absolute path
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///instance/'):
        app.config['SQLALCHEMY_DATABASE_URI'] = f'sqlite:///{os.path.join(basedir, "instance", "workload.db")}'

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)
    limiter.init_app(app)

    # Enable foreign key constraints for SQLite
    from sqlalchemy import event
    from sqlalchemy.engine import Engine

    @event.listens_for(Engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        """Enable foreign key constraints for SQLite connections"""
        if 'sqlite' in str(dbapi_conn):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    # Configure logging and error handling
    from workload_app.error_handlers import setup_logging, register_error_handlers
    setup_logging(app)
    register_error_handlers(app)

    # Initialize database models
    from workload_app.models import init_models, model_registry
    models = init_models(db)
    model_registry.init_app(app)
    model_registry.register(models)

    register_blueprints(app)
    setup_request_handlers(app)

    app.logger.info(f"Workload service initialized ({config_class.__name__})")
    return app


def register_blueprints(app):
    """Register all Flask blueprints."""
    from workload_app.routes import api_workload_bp, api_absences_bp, health_bp

    app.register_blueprint(api_workload_bp)
    app.register_blueprint(api_absences_bp)
    app.register_blueprint(health_bp)

    # Probes are polled by orchestrators and must not be throttled
    limiter.exempt(health_bp)


def setup_request_handlers(app):
    """Setup request and response handlers."""

    @app.after_request
    def add_security_headers(response):
        """Apply configured security headers to every response"""
        for header, value in app.config.get('SECURITY_HEADERS', {}).items():
            response.headers.setdefault(header, value)
        return response

    @app.after_request
    def add_csrf_token_cookie(response):
        """
        Add CSRF token to cookie for AJAX requests.

        JavaScript clients echo it in the X-CSRFToken header on POST/DELETE.
        """
        if app.config.get('WTF_CSRF_ENABLED', True) and request.endpoint:
            response.set_cookie(
                'csrf_token',
                generate_csrf(),
                secure=app.config.get('SESSION_COOKIE_SECURE', False),
                httponly=False,
                samesite='Lax'
            )
        return response


def init_db(app):
    """Initialize the database."""
    with app.app_context():
        db.create_all()
