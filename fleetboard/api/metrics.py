"""
Metrics and status API endpoints.

Provides endpoints for:
- GET /api/metrics/fleet - Fleet schedule statistics for a window
- GET /api/metrics/status - System status and health
"""

import logging
import time
from datetime import datetime, timezone

from flask import Blueprint, jsonify
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError

from fleetboard import __version__
from fleetboard.analytics import FleetAnalyzer
from fleetboard.api.policy import require_role
from fleetboard.api.timeline import requested_date_range
from fleetboard.config import config
from fleetboard.models import Aircraft, FlightRoute, get_session
from fleetboard.timeline import calculate_window

logger = logging.getLogger(__name__)

metrics_bp = Blueprint('metrics', __name__, url_prefix='/api/metrics')


@metrics_bp.route('/fleet', methods=['GET'])
@require_role()
def get_fleet_metrics():
    """
    Get aggregate schedule statistics for the whole fleet.

    Query parameters start/end select the window as for /api/timeline.

    Returns:
    - Aircraft count by status
    - Route count by status (routes departing in the window)
    - Block hour distribution
    - Per-aircraft utilization and overlapping legs
    """
    start_time = time.perf_counter()
    start, end = requested_date_range()
    window = calculate_window(start, end, 24)

    with get_session() as session:
        fleet = session.scalars(select(Aircraft)).all()
        routes = session.scalars(
            select(FlightRoute)
            .where(FlightRoute.arrival_time > window.day_start)
            .where(FlightRoute.departure_time <= window.day_end)
        ).all()
        stats = FleetAnalyzer().analyze(window, fleet, routes)

    query_time_ms = (time.perf_counter() - start_time) * 1000

    return jsonify({
        'window': window.to_dict(),
        'fleet': stats,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'query_time_ms': round(query_time_ms, 2),
    })


@metrics_bp.route('/status', methods=['GET'])
def get_system_status():
    """
    Get system health and status information.

    Returns:
    - Database connectivity
    - Configuration info
    """
    start_time = time.perf_counter()

    db_ok = True
    try:
        with get_session() as session:
            session.execute(text('SELECT 1'))
    except SQLAlchemyError as e:
        db_ok = False
        logger.error(f'Database health check failed: {e}')

    query_time_ms = (time.perf_counter() - start_time) * 1000

    return jsonify({
        'status': 'healthy' if db_ok else 'degraded',
        'version': __version__,
        'database': {
            'connected': db_ok,
            'type': 'sqlite' if config.database.is_sqlite else 'postgresql',
        },
        'config': {
            'default_chunk_hours': config.timeline.default_chunk_hours,
            'max_days': config.timeline.max_days,
            'enforce_roles': config.auth.enforce_roles,
        },
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'query_time_ms': round(query_time_ms, 2),
    })
