"""
Sample fleet and schedule for local development.

Loads five aircraft and a handful of routes spread over the next two
days, relative to the current time.

Usage:
    python -m fleetboard.seed
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from fleetboard.models import Aircraft, FlightRoute, get_session, init_db
from fleetboard.timeutil import utcnow

logger = logging.getLogger(__name__)

SAMPLE_AIRCRAFT = [
    ('N123AB', 'Boeing 737-800', 'active'),
    ('N456CD', 'Airbus A320', 'active'),
    ('N789EF', 'Boeing 787-9', 'active'),
    ('N321GH', 'Airbus A350', 'maintenance'),
    ('N654IJ', 'Boeing 777-300ER', 'active'),
]

# (registration, flight prefix, base number, origin, destination,
#  leg count, hours between departures, block hours)
SAMPLE_ROTATIONS = [
    ('N123AB', 'AA', 100, 'JFK', 'LAX', 3, 1, 5),
    ('N456CD', 'DL', 200, 'ATL', 'ORD', 4, 6, 2),
    ('N789EF', 'UA', 300, 'SFO', 'NRT', 2, 12, 11),
]


def seed(session: Session, now: Optional[datetime] = None) -> int:
    """
    Insert the sample fleet and routes.

    Returns the number of routes created.
    """
    now = now or utcnow()

    fleet = {}
    for registration, aircraft_type, status in SAMPLE_AIRCRAFT:
        ac = Aircraft(registration=registration, aircraft_type=aircraft_type, status=status)
        session.add(ac)
        fleet[registration] = ac
    session.flush()

    count = 0
    for registration, prefix, base, origin, destination, legs, spacing, block in SAMPLE_ROTATIONS:
        for seq in range(1, legs + 1):
            departure = now + timedelta(hours=seq * spacing)
            session.add(FlightRoute(
                flight_number=f'{prefix}{base + seq}',
                aircraft_id=fleet[registration].id,
                origin=origin,
                destination=destination,
                departure_time=departure,
                arrival_time=departure + timedelta(hours=block),
            ))
            count += 1

    return count


def seed_if_empty() -> int:
    """Seed only when no aircraft exist yet. Returns routes created."""
    with get_session() as session:
        existing = session.scalar(select(func.count()).select_from(Aircraft))
        if existing:
            logger.info(f'Skipping seed, {existing} aircraft already present')
            return 0
        count = seed(session)

    logger.info(f'Seeded {len(SAMPLE_AIRCRAFT)} aircraft and {count} routes')
    return count


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')
    init_db()
    seed_if_empty()
