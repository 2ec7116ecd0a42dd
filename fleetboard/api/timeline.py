"""
Gantt timeline API endpoint.

- GET /api/timeline - Positioned schedule for a date window

Query parameters:
- start: YYYY-MM-DD, first day shown (default today, UTC)
- end: YYYY-MM-DD, last day shown (default start + 1 day)
- chunk_hours: 6|12|24, grid granularity (default DEFAULT_CHUNK_HOURS)

An end date before the start date is clamped up to the start date.
"""

import logging
import time
from datetime import date, timedelta
from typing import Tuple

from flask import Blueprint, jsonify
from sqlalchemy import select

from fleetboard.api.payloads import PayloadError, query_chunk_hours, query_day
from fleetboard.api.policy import require_role
from fleetboard.config import config
from fleetboard.models import Aircraft, AircraftStatus, FlightRoute, get_session
from fleetboard.timeline import build_board, calculate_window, default_date_range, normalize_date_range
from fleetboard.timeline.window import TimelineWindow
from fleetboard.timeutil import utcnow

logger = logging.getLogger(__name__)

timeline_bp = Blueprint('timeline', __name__, url_prefix='/api/timeline')


def requested_date_range() -> Tuple[date, date]:
    """
    Read start/end from the query string, defaulting and clamping.

    The window closes at midnight after the end date, so that day must
    still be representable.
    """
    start = query_day('start', utcnow().date())
    try:
        _, default_end = default_date_range(start, config.timeline.default_extra_days)
    except OverflowError:
        default_end = date.max
    end = query_day('end', default_end)
    start, end = normalize_date_range(start, end, anchor='start')
    if end >= date.max:
        raise PayloadError(f'dates must be before {date.max.isoformat()}')

    num_days = (end - start).days + 1
    if num_days > config.timeline.max_days:
        raise PayloadError(f'window may span at most {config.timeline.max_days} days')
    return start, end


def requested_window() -> TimelineWindow:
    start, end = requested_date_range()
    chunk_hours = query_chunk_hours(config.timeline.default_chunk_hours)
    return calculate_window(start, end, chunk_hours)


def window_routes_stmt(window: TimelineWindow):
    """Routes departing inside the window, in departure order."""
    window_close = window.day_start + timedelta(hours=window.total_hours)
    return (
        select(FlightRoute)
        .where(FlightRoute.departure_time >= window.day_start)
        .where(FlightRoute.departure_time < window_close)
        .order_by(FlightRoute.departure_time)
    )


@timeline_bp.route('', methods=['GET'])
@require_role()
def get_timeline():
    """
    Lay out active aircraft and their routes on the chunked grid.

    Response includes the window, date/hour labels, separators and one
    row per active aircraft with each route's left/width percentages.
    Only routes departing inside the window are loaded, so hidden_count
    is the number of those flown by aircraft not shown (maintenance or
    inactive).
    """
    start_time = time.perf_counter()
    window = requested_window()

    with get_session() as session:
        fleet = session.scalars(
            select(Aircraft)
            .where(Aircraft.status == AircraftStatus.ACTIVE.value)
            .order_by(Aircraft.registration)
        ).all()
        routes = session.scalars(window_routes_stmt(window)).all()
        board = build_board(window, fleet, routes)
        result = board.to_dict()

    query_time_ms = (time.perf_counter() - start_time) * 1000
    result['query_time_ms'] = round(query_time_ms, 2)
    return jsonify(result)
