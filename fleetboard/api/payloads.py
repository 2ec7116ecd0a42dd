"""
Request body and query validation.

Handlers call these helpers and let PayloadError propagate; the
application maps it to a 400 response.
"""

from datetime import date, datetime
from typing import Any, Dict, Optional

from flask import request

from fleetboard.config import ALLOWED_CHUNK_HOURS
from fleetboard.models import AircraftStatus, FlightStatus
from fleetboard.timeutil import parse_day, parse_instant

AIRCRAFT_STATUSES = {s.value for s in AircraftStatus}
FLIGHT_STATUSES = {s.value for s in FlightStatus}


class PayloadError(ValueError):
    """Invalid client input."""


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise PayloadError('JSON object body required')
    return data


def _text(data: dict, key: str, max_len: int, upper: bool = False) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise PayloadError(f'{key} is required')
    value = value.strip()
    if len(value) > max_len:
        raise PayloadError(f'{key} must be at most {max_len} characters')
    return value.upper() if upper else value


def _choice(data: dict, key: str, choices: set) -> str:
    value = data.get(key)
    if value not in choices:
        raise PayloadError(f'{key} must be one of {sorted(choices)}')
    return value


def _instant(data: dict, key: str) -> datetime:
    try:
        return parse_instant(data.get(key))
    except (TypeError, ValueError, OverflowError):
        raise PayloadError(f'{key} must be an ISO-8601 timestamp')


def parse_aircraft(data: dict, partial: bool = False) -> Dict[str, Any]:
    """
    Validate an aircraft create/update body.

    With partial=True only the keys present are validated and returned.
    """
    fields: Dict[str, Any] = {}
    if not partial or 'registration' in data:
        fields['registration'] = _text(data, 'registration', 20, upper=True)
    if not partial or 'aircraft_type' in data:
        fields['aircraft_type'] = _text(data, 'aircraft_type', 100)
    if 'status' in data:
        fields['status'] = _choice(data, 'status', AIRCRAFT_STATUSES)
    elif not partial:
        fields['status'] = AircraftStatus.ACTIVE.value
    return fields


def parse_route(
    data: dict,
    partial: bool = False,
    current_departure: Optional[datetime] = None,
    current_arrival: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Validate a flight route create/update body.

    For partial updates the arrival-after-departure rule is checked
    against the stored value of whichever instant is not being changed.
    """
    fields: Dict[str, Any] = {}
    if not partial or 'flight_number' in data:
        fields['flight_number'] = _text(data, 'flight_number', 20, upper=True)
    if not partial or 'aircraft_id' in data:
        fields['aircraft_id'] = _text(data, 'aircraft_id', 36)
    if not partial or 'origin' in data:
        fields['origin'] = _text(data, 'origin', 10, upper=True)
    if not partial or 'destination' in data:
        fields['destination'] = _text(data, 'destination', 10, upper=True)
    if not partial or 'departure_time' in data:
        fields['departure_time'] = _instant(data, 'departure_time')
    if not partial or 'arrival_time' in data:
        fields['arrival_time'] = _instant(data, 'arrival_time')
    if 'status' in data:
        fields['status'] = _choice(data, 'status', FLIGHT_STATUSES)
    elif not partial:
        fields['status'] = FlightStatus.SCHEDULED.value

    departure = fields.get('departure_time', current_departure)
    arrival = fields.get('arrival_time', current_arrival)
    if departure is not None and arrival is not None and arrival <= departure:
        raise PayloadError('arrival_time must be after departure_time')

    return fields


def query_day(name: str, default: date) -> date:
    try:
        return parse_day(request.args.get(name), default)
    except ValueError:
        raise PayloadError(f'{name} must be a YYYY-MM-DD date')


def query_chunk_hours(default: int) -> int:
    raw = request.args.get('chunk_hours')
    if raw is None or raw == '':
        return default
    try:
        hours = int(raw)
    except ValueError:
        raise PayloadError('chunk_hours must be an integer')
    if hours not in ALLOWED_CHUNK_HOURS:
        raise PayloadError(f'chunk_hours must be one of {list(ALLOWED_CHUNK_HOURS)}')
    return hours
