"""
Health Check Endpoints
Provides endpoints for liveness and readiness checks.
"""
from flask import Blueprint, jsonify, current_app
from datetime import datetime, timezone
from sqlalchemy import text

health_bp = Blueprint('health', __name__, url_prefix='/health')


def _timestamp():
    return datetime.now(timezone.utc).isoformat()


@health_bp.route('/ping', methods=['GET'])
def ping():
    """
    Simple ping endpoint for basic connectivity checks.
    Returns: 200 OK with pong message
    """
    return jsonify({
        'status': 'ok',
        'message': 'pong',
        'timestamp': _timestamp()
    }), 200


@health_bp.route('/live', methods=['GET'])
def liveness():
    """
    Liveness probe - checks if application is running.

    Returns:
        200: Application is alive
    """
    return jsonify({
        'status': 'alive',
        'timestamp': _timestamp()
    }), 200


@health_bp.route('/ready', methods=['GET'])
def readiness():
    """
    Readiness probe - checks if application is ready to serve traffic.

    Returns:
        200: Database reachable
        503: Database not reachable
    """
    checks = {'database': False}
    errors = []

    try:
        db = current_app.extensions['sqlalchemy']
        db.session.execute(text('SELECT 1'))
        checks['database'] = True
    except Exception as e:
        current_app.logger.warning(f"Readiness check failed: {e}")
        errors.append(f"Database: {str(e)}")

    all_checks_passed = all(checks.values())
    response = {
        'status': 'ready' if all_checks_passed else 'not_ready',
        'checks': checks,
        'timestamp': _timestamp()
    }
    if errors:
        response['errors'] = errors

    return jsonify(response), 200 if all_checks_passed else 503
