"""
Timeline window calculation.

Turns a pair of calendar dates plus a chunk granularity into the UTC
window the Gantt grid is drawn over. A window always covers whole UTC
days and is split into equal chunks of 6, 12 or 24 hours.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple

from fleetboard.config import ALLOWED_CHUNK_HOURS

# Last representable instant of a day at millisecond resolution
END_OF_DAY = time(23, 59, 59, 999000)


@dataclass(frozen=True)
class TimelineWindow:
    """
    Derived timeline window. Never persisted.

    Attributes:
        start_date: First calendar day shown
        end_date: Last calendar day shown (inclusive)
        day_start: UTC midnight of start_date
        day_end: UTC 23:59:59.999 of end_date
        num_days: Inclusive day count
        total_hours: num_days * 24
        chunk_hours: Grid unit in hours (6, 12 or 24)
        num_chunks: ceil(total_hours / chunk_hours)
    """
    start_date: date
    end_date: date
    day_start: datetime
    day_end: datetime
    num_days: int
    total_hours: int
    chunk_hours: int
    num_chunks: int

    @property
    def chunk_width_percent(self) -> float:
        """Share of the container width taken by one chunk."""
        return 100 / self.num_chunks

    def to_dict(self) -> dict:
        return {
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'day_start': self.day_start.isoformat(),
            'day_end': self.day_end.isoformat(),
            'num_days': self.num_days,
            'total_hours': self.total_hours,
            'chunk_hours': self.chunk_hours,
            'num_chunks': self.num_chunks,
        }


def calculate_window(start_date: date, end_date: date, chunk_hours: int) -> TimelineWindow:
    """
    Compute the UTC window for an inclusive date range.

    The range is assumed valid (end_date >= start_date); callers normalize
    user input with normalize_date_range() first.

    Raises:
        ValueError: if chunk_hours is not one of 6, 12 or 24.
    """
    if chunk_hours not in ALLOWED_CHUNK_HOURS:
        raise ValueError(f'chunk_hours must be one of {ALLOWED_CHUNK_HOURS}, got {chunk_hours}')

    day_start = datetime.combine(start_date, time.min, tzinfo=timezone.utc)
    day_end = datetime.combine(end_date, END_OF_DAY, tzinfo=timezone.utc)

    num_days = (end_date - start_date).days + 1
    total_hours = num_days * 24
    num_chunks = math.ceil(total_hours / chunk_hours)

    return TimelineWindow(
        start_date=start_date,
        end_date=end_date,
        day_start=day_start,
        day_end=day_end,
        num_days=num_days,
        total_hours=total_hours,
        chunk_hours=chunk_hours,
        num_chunks=num_chunks,
    )


def normalize_date_range(start_date: date, end_date: date, anchor: str = 'start') -> Tuple[date, date]:
    """
    Clamp an inverted date range so the window is never negative.

    The side named by anchor is kept as chosen and the other side is
    moved onto it. A valid range is returned unchanged.
    """
    if anchor not in ('start', 'end'):
        raise ValueError(f"anchor must be 'start' or 'end', got {anchor!r}")
    if end_date >= start_date:
        return start_date, end_date
    if anchor == 'start':
        return start_date, start_date
    return end_date, end_date


def default_date_range(today: date, extra_days: int = 1) -> Tuple[date, date]:
    """Today through today + extra_days, the board's initial view."""
    return today, today + timedelta(days=extra_days)
