"""
Maps flight departure/arrival instants onto the chunked timeline grid.

Positions are percentages of the container width. Each chunk takes
100/num_chunks percent; an event is placed inside the chunk that holds
its departure and sized by its duration. Events that cross a chunk
boundary are not split and may overhang into the next chunk.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from fleetboard.timeline.window import TimelineWindow

# Floor for rendered width so very short legs stay clickable
MIN_WIDTH_PERCENT = 0.5

SECONDS_PER_HOUR = 3600


@dataclass(frozen=True)
class EventPosition:
    """Horizontal placement of one event on the timeline."""
    left_percent: float
    width_percent: float
    visible: bool
    chunk_index: int

    def to_dict(self) -> dict:
        return {
            'left_percent': self.left_percent,
            'width_percent': self.width_percent,
            'visible': self.visible,
            'chunk_index': self.chunk_index,
        }


HIDDEN = EventPosition(left_percent=0.0, width_percent=0.0, visible=False, chunk_index=-1)


def hours_between(start: datetime, end: datetime) -> float:
    """Signed fractional hours from start to end."""
    return (end - start).total_seconds() / SECONDS_PER_HOUR


def position_event(departure: datetime, arrival: datetime, window: TimelineWindow) -> EventPosition:
    """
    Place one event on the grid.

    Visibility depends on departure only: a leg that departed before the
    window is hidden even if it is still airborne during it.

    Both instants must be timezone-aware. arrival > departure is assumed.
    """
    hours_from_start = hours_between(window.day_start, departure)
    hours_to_arrival = hours_between(window.day_start, arrival)

    if hours_from_start < 0 or hours_from_start >= window.total_hours:
        return HIDDEN

    chunk_hours = window.chunk_hours
    chunk_width = 100 / window.num_chunks

    departure_chunk = math.floor(hours_from_start / chunk_hours)
    hours_within_chunk = hours_from_start % chunk_hours
    duration = hours_to_arrival - hours_from_start

    chunk_left_percent = (departure_chunk / window.num_chunks) * 100
    within_chunk_percent = (hours_within_chunk / chunk_hours) * chunk_width
    width_percent = max(MIN_WIDTH_PERCENT, (duration / chunk_hours) * chunk_width)

    return EventPosition(
        left_percent=chunk_left_percent + within_chunk_percent,
        width_percent=width_percent,
        visible=True,
        chunk_index=departure_chunk,
    )
