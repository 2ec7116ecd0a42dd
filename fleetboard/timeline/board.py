"""
Gantt board assembly.

Combines a window, its labels and separators with fleet records into
one payload: a row per aircraft holding that aircraft's positioned legs.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from fleetboard.models import Aircraft, FlightRoute
from fleetboard.timeline.labels import (
    ChunkLabel,
    HourTick,
    Separator,
    chunk_date_labels,
    hour_ticks,
    separators,
)
from fleetboard.timeline.positioning import EventPosition, position_event
from fleetboard.timeline.window import TimelineWindow

logger = logging.getLogger(__name__)


@dataclass
class BoardEvent:
    """A route together with its placement."""
    route: FlightRoute
    position: EventPosition

    def to_dict(self) -> dict:
        data = self.route.to_dict()
        data['position'] = self.position.to_dict()
        return data


@dataclass
class BoardRow:
    """One aircraft lane."""
    aircraft: Aircraft
    events: List[BoardEvent] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'aircraft': self.aircraft.to_dict(),
            'events': [e.to_dict() for e in self.events],
        }


@dataclass
class GanttBoard:
    window: TimelineWindow
    date_labels: List[ChunkLabel]
    hour_ticks: List[HourTick]
    separators: List[Separator]
    rows: List[BoardRow]
    hidden_count: int = 0

    def to_dict(self) -> dict:
        return {
            'window': self.window.to_dict(),
            'labels': {
                'dates': [label.to_dict() for label in self.date_labels],
                'hours': [tick.to_dict() for tick in self.hour_ticks],
            },
            'separators': [s.to_dict() for s in self.separators],
            'rows': [row.to_dict() for row in self.rows],
            'hidden_count': self.hidden_count,
        }


def build_board(
    window: TimelineWindow,
    aircraft: Iterable[Aircraft],
    routes: Iterable[FlightRoute],
) -> GanttBoard:
    """
    Lay out the fleet schedule for a window.

    Rows follow registration order; events within a row follow departure
    order. Of the routes passed in, those whose departure falls outside
    the window or whose aircraft has no row are left off the board and
    counted in hidden_count. Callers that pre-filter routes to the window
    therefore only see the second kind counted.
    """
    rows: Dict[str, BoardRow] = {}
    for ac in sorted(aircraft, key=lambda a: a.registration):
        rows[ac.id] = BoardRow(aircraft=ac)

    hidden = 0
    for route in sorted(routes, key=lambda r: r.departure_time):
        row = rows.get(route.aircraft_id)
        if row is None:
            hidden += 1
            continue
        position = position_event(route.departure_time, route.arrival_time, window)
        if not position.visible:
            hidden += 1
            continue
        row.events.append(BoardEvent(route=route, position=position))

    logger.debug(
        f'Board built: {len(rows)} rows, {sum(len(r.events) for r in rows.values())} events, '
        f'{hidden} hidden'
    )

    return GanttBoard(
        window=window,
        date_labels=chunk_date_labels(window.num_chunks, window.chunk_hours, window.start_date),
        hour_ticks=hour_ticks(window.num_chunks, window.chunk_hours),
        separators=separators(window.num_chunks, window.chunk_hours),
        rows=list(rows.values()),
        hidden_count=hidden,
    )
