"""
Date headers, hour ticks and vertical grid lines for the timeline.

Everything here is a pure function of (num_chunks, chunk_hours,
start_date) and uses the same chunk geometry as the event positioner,
so labels and bars always line up.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List

DATE_LABEL_FORMAT = '%b %d'


@dataclass(frozen=True)
class ChunkLabel:
    """Date header for one chunk."""
    chunk_index: int
    day: date
    text: str
    left_percent: float

    def to_dict(self) -> dict:
        return {
            'chunk_index': self.chunk_index,
            'date': self.day.isoformat(),
            'text': self.text,
            'left_percent': self.left_percent,
        }


@dataclass(frozen=True)
class HourTick:
    """Hour-of-day label inside a chunk."""
    chunk_index: int
    hour: int
    text: str
    left_percent: float

    def to_dict(self) -> dict:
        return {
            'chunk_index': self.chunk_index,
            'hour': self.hour,
            'text': self.text,
            'left_percent': self.left_percent,
        }


@dataclass(frozen=True)
class Separator:
    """Vertical grid line."""
    chunk_index: int
    hour: int
    left_percent: float
    is_chunk_boundary: bool

    def to_dict(self) -> dict:
        return {
            'chunk_index': self.chunk_index,
            'hour': self.hour,
            'left_percent': self.left_percent,
            'is_chunk_boundary': self.is_chunk_boundary,
        }


def tick_interval(chunk_hours: int) -> int:
    """Hours between tick labels: every 2h on 12h chunks, otherwise hourly."""
    return 2 if chunk_hours == 12 else 1


def _chunk_left(chunk_index: int, num_chunks: int) -> float:
    return (chunk_index / num_chunks) * 100


def _offset_left(chunk_index: int, hour: int, num_chunks: int, chunk_hours: int) -> float:
    return _chunk_left(chunk_index, num_chunks) + (hour / chunk_hours) * (100 / num_chunks)


def chunk_date_labels(num_chunks: int, chunk_hours: int, start_date: date) -> List[ChunkLabel]:
    """One short date label per chunk, for the day the chunk starts on."""
    labels = []
    for chunk_index in range(num_chunks):
        day = start_date + timedelta(days=(chunk_index * chunk_hours) // 24)
        labels.append(ChunkLabel(
            chunk_index=chunk_index,
            day=day,
            text=day.strftime(DATE_LABEL_FORMAT),
            left_percent=_chunk_left(chunk_index, num_chunks),
        ))
    return labels


def hour_ticks(num_chunks: int, chunk_hours: int) -> List[HourTick]:
    """Zero-padded hour-of-day labels for every chunk."""
    step = tick_interval(chunk_hours)
    ticks = []
    for chunk_index in range(num_chunks):
        base_hour = chunk_index * chunk_hours
        for hour in range(0, chunk_hours, step):
            hour_of_day = (base_hour + hour) % 24
            ticks.append(HourTick(
                chunk_index=chunk_index,
                hour=hour_of_day,
                text=f'{hour_of_day:02d}',
                left_percent=_offset_left(chunk_index, hour, num_chunks, chunk_hours),
            ))
    return ticks


def separators(num_chunks: int, chunk_hours: int) -> List[Separator]:
    """
    Grid lines at every hour boundary.

    Each chunk draws boundaries 0..chunk_hours inclusive. Hour 0 of every
    chunk after the first sits on the previous chunk's last boundary and
    is skipped, so no line is drawn twice.
    """
    lines = []
    for chunk_index in range(num_chunks):
        for hour in range(chunk_hours + 1):
            if hour == 0 and chunk_index > 0:
                continue
            lines.append(Separator(
                chunk_index=chunk_index,
                hour=hour,
                left_percent=_offset_left(chunk_index, hour, num_chunks, chunk_hours),
                is_chunk_boundary=hour in (0, chunk_hours),
            ))
    return lines
