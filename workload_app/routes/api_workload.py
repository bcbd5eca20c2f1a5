"""
Workload API Routes
Read-only utilization figures for today, this week and this month
"""
from datetime import date
from flask import Blueprint, request, jsonify, current_app

from workload_app.error_handlers import handle_errors
from workload_app.error_handlers.exceptions import AuthorizationException
from workload_app.models import get_models
from workload_app.routes.auth import require_authentication, get_current_user
from workload_app.services import SQLAlchemyWorkloadStore, WorkloadService, normalize_user_ids
from workload_app.utils.validators import parse_id_list, validate_optional_date_param

api_workload_bp = Blueprint('api_workload', __name__, url_prefix='/api/workload')


def authorize_user_ids(caller, user_ids):
    """
    Reject requests for other users' data unless the caller may view others.

    Raises:
        AuthorizationException: If a non-privileged caller asks for someone else
    """
    if caller.can_view_others():
        return user_ids
    foreign = [user_id for user_id in user_ids if user_id != caller.id]
    if foreign:
        raise AuthorizationException('Not allowed to view workload of other users')
    return user_ids


@api_workload_bp.route('', methods=['GET'])
@handle_errors
@require_authentication()
def get_workload():
    """
    Get workload figures for one or more users

    Query Parameters:
        userIds: Comma separated user IDs (default: the caller)
        date: Reference day in YYYY-MM-DD format (default: today)

    Returns:
        JSON array with one record per known user:
        [
            {
                "userId": "u1", "userName": "...", "userEmail": "...",
                "weeklyHours": 40.0, "workloadPercent": 100,
                "availableHoursPerWeek": 40.0,
                "periods": {
                    "day": {"assigned": 4.0, "capacity": 8.0, "percentage": 50, "absenceDays": 0},
                    "week": {...},
                    "month": {...}
                }
            }
        ]
    """
    caller = get_current_user()
    max_ids = current_app.config.get('WORKLOAD_MAX_USER_IDS')

    requested = parse_id_list(request.args.get('userIds'))
    if requested is None:
        requested = [caller.id]
    user_ids = authorize_user_ids(caller, normalize_user_ids(requested, max_ids))

    today = validate_optional_date_param(request.args.get('date'), 'date') or date.today()

    db = current_app.extensions['sqlalchemy']
    store = SQLAlchemyWorkloadStore(
        db.session,
        get_models(),
        work_week_days=current_app.config.get('WORKLOAD_WORK_WEEK_DAYS', 5)
    )
    results = WorkloadService(store, max_user_ids=max_ids).calculate(user_ids, today)

    return jsonify([result.to_dict() for result in results])
