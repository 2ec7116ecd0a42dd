"""
UTC helpers shared by the models, the API and the timeline.

Every instant FleetBoard handles is timezone-aware UTC. Naive values
coming from SQLite or from clients are read as UTC.
"""

from datetime import date, datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_instant(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Accepts a trailing 'Z' and the minute-precision form produced by
    HTML datetime-local inputs ('2025-01-01T05:00').

    Raises:
        ValueError: if the string is not a valid timestamp.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError('timestamp must be a non-empty string')
    text = value.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    parsed = datetime.fromisoformat(text)
    try:
        return ensure_utc(parsed)
    except OverflowError:
        # Offset pushes the instant outside the representable range
        raise ValueError(f'timestamp out of range: {value}')


def parse_day(value: Optional[str], default: date) -> date:
    """
    Parse a 'YYYY-MM-DD' calendar date, or return default when empty.

    Raises:
        ValueError: if the string is not a valid date.
    """
    if value is None or not value.strip():
        return default
    return date.fromisoformat(value.strip())


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    """Serialize an instant with an explicit UTC offset."""
    if value is None:
        return None
    return ensure_utc(value).isoformat()
