"""
Aircraft API endpoints.

Provides endpoints for:
- GET /api/aircraft - List the fleet (optional ?status= filter)
- GET /api/aircraft/<id> - Get one aircraft
- POST /api/aircraft - Add an aircraft
- PUT/PATCH /api/aircraft/<id> - Edit an aircraft
- DELETE /api/aircraft/<id> - Remove an aircraft and its routes (admin only)
"""

import logging

from flask import Blueprint, jsonify, request
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from fleetboard.api.payloads import AIRCRAFT_STATUSES, PayloadError, json_body, parse_aircraft
from fleetboard.api.policy import Role, require_role
from fleetboard.models import Aircraft, get_session

logger = logging.getLogger(__name__)

aircraft_bp = Blueprint('aircraft', __name__, url_prefix='/api/aircraft')

EDITOR_ROLES = (Role.ADMIN, Role.CONTROLLER, Role.PLANNER)


def _duplicate_registration(registration: str):
    return jsonify({'error': f'Registration {registration} already exists'}), 409


@aircraft_bp.route('', methods=['GET'])
@require_role()
def list_aircraft():
    """
    List aircraft ordered by registration.

    Query parameters:
    - status: active|maintenance|inactive, filter by lifecycle status
    """
    status = request.args.get('status')
    if status is not None and status not in AIRCRAFT_STATUSES:
        raise PayloadError(f'status must be one of {sorted(AIRCRAFT_STATUSES)}')

    stmt = select(Aircraft).order_by(Aircraft.registration)
    if status:
        stmt = stmt.where(Aircraft.status == status)

    with get_session() as session:
        fleet = session.scalars(stmt).all()
        items = [ac.to_dict() for ac in fleet]

    return jsonify({'aircraft': items, 'count': len(items)})


@aircraft_bp.route('/<aircraft_id>', methods=['GET'])
@require_role()
def get_aircraft(aircraft_id: str):
    with get_session() as session:
        ac = session.get(Aircraft, aircraft_id)
        if ac is None:
            return jsonify({'error': 'Aircraft not found'}), 404
        return jsonify(ac.to_dict())


@aircraft_bp.route('', methods=['POST'])
@require_role(*EDITOR_ROLES)
def create_aircraft():
    fields = parse_aircraft(json_body())

    try:
        with get_session() as session:
            ac = Aircraft(**fields)
            session.add(ac)
            session.flush()
            result = ac.to_dict()
    except IntegrityError:
        return _duplicate_registration(fields['registration'])

    logger.info(f'Aircraft {result["registration"]} added ({result["id"]})')
    return jsonify(result), 201


@aircraft_bp.route('/<aircraft_id>', methods=['PUT', 'PATCH'])
@require_role(*EDITOR_ROLES)
def update_aircraft(aircraft_id: str):
    fields = parse_aircraft(json_body(), partial=request.method == 'PATCH')

    try:
        with get_session() as session:
            ac = session.get(Aircraft, aircraft_id)
            if ac is None:
                return jsonify({'error': 'Aircraft not found'}), 404
            for key, value in fields.items():
                setattr(ac, key, value)
            session.flush()
            result = ac.to_dict()
    except IntegrityError:
        return _duplicate_registration(fields.get('registration', ''))

    logger.info(f'Aircraft {result["registration"]} updated')
    return jsonify(result)


@aircraft_bp.route('/<aircraft_id>', methods=['DELETE'])
@require_role(Role.ADMIN)
def delete_aircraft(aircraft_id: str):
    with get_session() as session:
        ac = session.get(Aircraft, aircraft_id)
        if ac is None:
            return jsonify({'error': 'Aircraft not found'}), 404
        registration = ac.registration
        session.delete(ac)

    logger.info(f'Aircraft {registration} deleted with its routes')
    return '', 204
