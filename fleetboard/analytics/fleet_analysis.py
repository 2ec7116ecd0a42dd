"""
Fleet schedule statistics using NumPy.

Summarizes how the fleet is used inside a timeline window:

1. Block hours: distribution of scheduled leg durations
2. Utilization: share of the window each aircraft spends scheduled
3. Conflicts: legs on the same aircraft whose times overlap

Cancelled legs are ignored for utilization and conflicts since they
no longer occupy the aircraft.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

import numpy as np

from fleetboard.models import Aircraft, AircraftStatus, FlightRoute, FlightStatus
from fleetboard.timeline.window import TimelineWindow

logger = logging.getLogger(__name__)


@dataclass
class BlockHourStats:
    """Distribution of scheduled leg durations, in hours."""
    mean: float
    std: float
    min_val: float
    max_val: float
    total: float
    count: int

    def to_dict(self) -> dict:
        return {
            'mean': round(self.mean, 2),
            'std': round(self.std, 2),
            'min': round(self.min_val, 2),
            'max': round(self.max_val, 2),
            'total': round(self.total, 2),
            'count': self.count,
        }


@dataclass
class AircraftUtilization:
    """Scheduled time for one aircraft within the window."""
    aircraft_id: str
    registration: str
    scheduled_hours: float
    utilization_percent: float
    leg_count: int
    conflicts: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'aircraft_id': self.aircraft_id,
            'registration': self.registration,
            'scheduled_hours': round(self.scheduled_hours, 2),
            'utilization_percent': round(self.utilization_percent, 2),
            'leg_count': self.leg_count,
            'conflicts': self.conflicts,
        }


class FleetAnalyzer:
    """
    Computes fleet-wide schedule statistics for a window.

    Works on already-loaded records; the caller owns the session.
    """

    def analyze(
        self,
        window: TimelineWindow,
        aircraft: Iterable[Aircraft],
        routes: Iterable[FlightRoute],
    ) -> dict:
        aircraft = list(aircraft)
        routes = list(routes)

        aircraft_counts = {s.value: 0 for s in AircraftStatus}
        for ac in aircraft:
            aircraft_counts[ac.status] = aircraft_counts.get(ac.status, 0) + 1

        route_counts = {s.value: 0 for s in FlightStatus}
        for r in routes:
            route_counts[r.status] = route_counts.get(r.status, 0) + 1

        flying = [r for r in routes if r.status != FlightStatus.CANCELLED.value]
        by_aircraft: Dict[str, List[FlightRoute]] = {}
        for r in flying:
            by_aircraft.setdefault(r.aircraft_id, []).append(r)

        utilization = [
            self._utilization(ac, by_aircraft.get(ac.id, []), window)
            for ac in sorted(aircraft, key=lambda a: a.registration)
        ]

        block_hours = self._block_hour_stats(flying)
        conflict_count = sum(len(u.conflicts) for u in utilization)
        if conflict_count:
            logger.info(f'{conflict_count} overlapping legs in window {window.start_date}..{window.end_date}')

        return {
            'aircraft_by_status': aircraft_counts,
            'routes_by_status': route_counts,
            'block_hours': block_hours.to_dict() if block_hours else None,
            'utilization': [u.to_dict() for u in utilization],
            'mean_utilization_percent': (
                round(float(np.mean([u.utilization_percent for u in utilization])), 2)
                if utilization else None
            ),
            'conflict_count': conflict_count,
        }

    def _block_hour_stats(self, routes: List[FlightRoute]) -> Optional[BlockHourStats]:
        if not routes:
            return None
        durations = np.array([r.block_hours for r in routes], dtype=np.float64)
        return BlockHourStats(
            mean=float(np.mean(durations)),
            std=float(np.std(durations)),
            min_val=float(np.min(durations)),
            max_val=float(np.max(durations)),
            total=float(np.sum(durations)),
            count=int(durations.size),
        )

    def _utilization(
        self,
        aircraft: Aircraft,
        routes: List[FlightRoute],
        window: TimelineWindow,
    ) -> AircraftUtilization:
        """
        Clip each leg to the window and sum the covered hours.

        Unlike the timeline's departure-keyed visibility, a leg counts
        toward utilization for whatever part of it overlaps the window.
        """
        if not routes:
            return AircraftUtilization(
                aircraft_id=aircraft.id,
                registration=aircraft.registration,
                scheduled_hours=0.0,
                utilization_percent=0.0,
                leg_count=0,
            )

        routes = sorted(routes, key=lambda r: r.departure_time)
        origin = window.day_start.timestamp()
        starts = (np.array([r.departure_time.timestamp() for r in routes]) - origin) / 3600
        ends = (np.array([r.arrival_time.timestamp() for r in routes]) - origin) / 3600

        clipped = np.clip(ends, 0, window.total_hours) - np.clip(starts, 0, window.total_hours)
        in_window = clipped > 0
        scheduled_hours = float(np.sum(clipped[in_window]))

        # Sorted by departure, so a leg overlaps when it leaves before
        # the latest arrival seen so far
        latest_arrival = np.maximum.accumulate(ends)
        overlaps = np.nonzero(starts[1:] < latest_arrival[:-1])[0] + 1
        conflicts = [routes[i].flight_number for i in overlaps if in_window[i]]

        return AircraftUtilization(
            aircraft_id=aircraft.id,
            registration=aircraft.registration,
            scheduled_hours=scheduled_hours,
            utilization_percent=min(100.0, scheduled_hours / window.total_hours * 100),
            leg_count=int(np.count_nonzero(in_window)),
            conflicts=conflicts,
        )
