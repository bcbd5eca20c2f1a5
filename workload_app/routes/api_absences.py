"""
Absences API Routes
Records the absence intervals the workload engine subtracts from capacity
"""
from flask import Blueprint, request, jsonify, current_app
from sqlalchemy import or_

from workload_app.error_handlers import handle_errors, with_db_transaction
from workload_app.error_handlers.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from workload_app.models import get_models
from workload_app.models.absence import ABSENCE_TYPES, default_color
from workload_app.routes.auth import require_authentication, get_current_user
from workload_app.utils.validators import (
    validate_date_param,
    validate_optional_date_param,
    validate_required_fields,
)

api_absences_bp = Blueprint('api_absences', __name__, url_prefix='/api/absences')


def _team_member_ids(caller):
    """IDs of users sharing the caller's team, the caller included"""
    if not caller.team_id:
        return [caller.id]
    db = current_app.extensions['sqlalchemy']
    User = get_models()['User']
    rows = db.session.query(User.id).filter(User.team_id == caller.team_id).all()
    return [row.id for row in rows]


def _visible_user_filter(caller, requested_user_id):
    """
    Build the user filter for listing absences

    Admins see everyone, coordinators their team, everyone else only
    themselves.
    """
    Absence = get_models()['Absence']

    if caller.is_admin():
        return Absence.user_id == requested_user_id if requested_user_id else None

    if caller.is_coordinator():
        member_ids = _team_member_ids(caller)
        if requested_user_id and requested_user_id in member_ids:
            return Absence.user_id == requested_user_id
        return Absence.user_id.in_(member_ids)

    return Absence.user_id == caller.id


def _resolve_target_user(caller, target_user_id):
    """
    Decide whose absence is being created

    A target outside the caller's reach falls back to the caller.
    """
    if not target_user_id or target_user_id == caller.id:
        return caller.id
    if caller.is_admin():
        User = get_models()['User']
        db = current_app.extensions['sqlalchemy']
        if db.session.get(User, target_user_id) is None:
            raise ResourceNotFoundException(f'User {target_user_id} not found')
        return target_user_id
    if caller.is_coordinator() and target_user_id in _team_member_ids(caller):
        return target_user_id
    current_app.logger.info(
        f"User {caller.id} may not record absences for {target_user_id}; using own account"
    )
    return caller.id


@api_absences_bp.route('', methods=['GET'])
@handle_errors
@require_authentication()
def list_absences():
    """
    List absences visible to the caller

    Query Parameters:
        startDate, endDate: Optional YYYY-MM-DD bounds (both required to filter);
            absences overlapping [startDate, endDate] are returned
        userId: Optional single user to narrow the list
    """
    caller = get_current_user()
    db = current_app.extensions['sqlalchemy']
    Absence = get_models()['Absence']

    start_date = validate_optional_date_param(request.args.get('startDate'), 'startDate')
    end_date = validate_optional_date_param(request.args.get('endDate'), 'endDate')

    query = db.session.query(Absence)

    user_filter = _visible_user_filter(caller, request.args.get('userId'))
    if user_filter is not None:
        query = query.filter(user_filter)

    if start_date and end_date:
        if end_date < start_date:
            raise ValidationException('endDate must not be before startDate')
        query = query.filter(or_(
            Absence.start_date.between(start_date, end_date),
            Absence.end_date.between(start_date, end_date),
            (Absence.start_date <= start_date) & (Absence.end_date >= end_date)
        ))

    absences = query.order_by(Absence.start_date, Absence.id).all()
    return jsonify([absence.to_dict() for absence in absences])


@api_absences_bp.route('', methods=['POST'])
@handle_errors
@require_authentication()
@with_db_transaction
def create_absence():
    """
    Create an absence

    Request JSON:
    {
        "title": "Summer holiday",
        "type": "vacation",  // vacation, workshop, sick, other
        "startDate": "2025-07-01",
        "endDate": "2025-07-14",
        "description": "Optional",
        "color": "#22c55e",  // optional, defaults by type
        "userId": "u2"  // optional, admins and coordinators only
    }
    """
    caller = get_current_user()
    db = current_app.extensions['sqlalchemy']
    Absence = get_models()['Absence']

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationException('Request body must be a JSON object')
    validate_required_fields(data, ['title', 'type', 'startDate', 'endDate'])

    if data['type'] not in ABSENCE_TYPES:
        raise ValidationException(
            f"Invalid type. Must be one of: {', '.join(ABSENCE_TYPES)}"
        )

    start_date = validate_date_param(data['startDate'], 'startDate')
    end_date = validate_date_param(data['endDate'], 'endDate')
    if end_date < start_date:
        raise ValidationException('endDate must not be before startDate')

    absence = Absence(
        user_id=_resolve_target_user(caller, data.get('userId')),
        title=data['title'],
        type=data['type'],
        start_date=start_date,
        end_date=end_date,
        description=data.get('description') or None,
        color=data.get('color') or default_color(data['type']),
    )
    db.session.add(absence)
    db.session.flush()

    current_app.logger.info(
        f"Absence created: user_id={absence.user_id}, {start_date} to {end_date}, type={absence.type}"
    )
    return jsonify(absence.to_dict()), 201


@api_absences_bp.route('/<int:absence_id>', methods=['DELETE'])
@handle_errors
@require_authentication()
@with_db_transaction
def delete_absence(absence_id):
    """Delete an absence; only its owner or an admin may do so"""
    caller = get_current_user()
    db = current_app.extensions['sqlalchemy']
    Absence = get_models()['Absence']

    absence = db.session.get(Absence, absence_id)
    if absence is None:
        raise ResourceNotFoundException('Absence not found')

    if not caller.is_admin() and absence.user_id != caller.id:
        raise AuthorizationException('Not allowed to delete this absence')

    db.session.delete(absence)
    current_app.logger.info(f"Absence {absence_id} deleted by {caller.id}")
    return jsonify({'success': True})
