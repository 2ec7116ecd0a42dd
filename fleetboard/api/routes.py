"""
Flight route API endpoints.

Provides endpoints for:
- GET /api/routes - List routes in departure order
- GET /api/routes/<id> - Get one route
- POST /api/routes - Schedule a route
- PUT/PATCH /api/routes/<id> - Edit a route
- DELETE /api/routes/<id> - Remove a route (admin, controller)
"""

import logging
from datetime import date, datetime, time, timedelta, timezone

from flask import Blueprint, jsonify, request
from sqlalchemy import select

from fleetboard.api.payloads import FLIGHT_STATUSES, PayloadError, json_body, parse_route
from fleetboard.api.policy import Role, require_role
from fleetboard.models import Aircraft, FlightRoute, get_session
from fleetboard.timeutil import parse_day

logger = logging.getLogger(__name__)

routes_bp = Blueprint('routes', __name__, url_prefix='/api/routes')


def _day_bound(name: str):
    raw = request.args.get(name)
    if not raw:
        return None
    try:
        return parse_day(raw, date.today())
    except ValueError:
        raise PayloadError(f'{name} must be a YYYY-MM-DD date')


@routes_bp.route('', methods=['GET'])
@require_role()
def list_routes():
    """
    List routes ordered by departure time.

    Query parameters:
    - aircraft_id: only routes flown by this aircraft
    - status: scheduled|in_flight|completed|cancelled|delayed
    - start, end: YYYY-MM-DD, only routes departing within these UTC days
    """
    stmt = select(FlightRoute).order_by(FlightRoute.departure_time)

    aircraft_id = request.args.get('aircraft_id')
    if aircraft_id:
        stmt = stmt.where(FlightRoute.aircraft_id == aircraft_id)

    status = request.args.get('status')
    if status is not None:
        if status not in FLIGHT_STATUSES:
            raise PayloadError(f'status must be one of {sorted(FLIGHT_STATUSES)}')
        stmt = stmt.where(FlightRoute.status == status)

    start = _day_bound('start')
    if start:
        stmt = stmt.where(FlightRoute.departure_time >= datetime.combine(start, time.min, tzinfo=timezone.utc))
    end = _day_bound('end')
    if end:
        try:
            next_day = datetime.combine(end + timedelta(days=1), time.min, tzinfo=timezone.utc)
        except OverflowError:
            raise PayloadError(f'end must be before {date.max.isoformat()}')
        stmt = stmt.where(FlightRoute.departure_time < next_day)

    with get_session() as session:
        items = [r.to_dict() for r in session.scalars(stmt).all()]

    return jsonify({'routes': items, 'count': len(items)})


@routes_bp.route('/<route_id>', methods=['GET'])
@require_role()
def get_route(route_id: str):
    with get_session() as session:
        route = session.get(FlightRoute, route_id)
        if route is None:
            return jsonify({'error': 'Route not found'}), 404
        return jsonify(route.to_dict())


@routes_bp.route('', methods=['POST'])
@require_role()
def create_route():
    fields = parse_route(json_body())

    with get_session() as session:
        if session.get(Aircraft, fields['aircraft_id']) is None:
            raise PayloadError('aircraft_id does not reference a known aircraft')
        route = FlightRoute(**fields)
        session.add(route)
        session.flush()
        result = route.to_dict()

    logger.info(f'Route {result["flight_number"]} scheduled ({result["id"]})')
    return jsonify(result), 201


@routes_bp.route('/<route_id>', methods=['PUT', 'PATCH'])
@require_role()
def update_route(route_id: str):
    data = json_body()

    with get_session() as session:
        route = session.get(FlightRoute, route_id)
        if route is None:
            return jsonify({'error': 'Route not found'}), 404

        fields = parse_route(
            data,
            partial=request.method == 'PATCH',
            current_departure=route.departure_time,
            current_arrival=route.arrival_time,
        )
        if 'aircraft_id' in fields and session.get(Aircraft, fields['aircraft_id']) is None:
            raise PayloadError('aircraft_id does not reference a known aircraft')

        for key, value in fields.items():
            setattr(route, key, value)
        session.flush()
        result = route.to_dict()

    logger.info(f'Route {result["flight_number"]} updated')
    return jsonify(result)


@routes_bp.route('/<route_id>', methods=['DELETE'])
@require_role(Role.ADMIN, Role.CONTROLLER)
def delete_route(route_id: str):
    with get_session() as session:
        route = session.get(FlightRoute, route_id)
        if route is None:
            return jsonify({'error': 'Route not found'}), 404
        flight_number = route.flight_number
        session.delete(route)

    logger.info(f'Route {flight_number} deleted')
    return '', 204
