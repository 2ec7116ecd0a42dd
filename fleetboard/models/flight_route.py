"""
FlightRoute model - scheduled legs flown by fleet aircraft.

Design notes:
- Departure and arrival are stored as UTC instants
- arrival_time > departure_time is enforced by a check constraint, so
  timeline code can rely on every leg having a positive duration
- Indexed by departure time for window queries
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional, TYPE_CHECKING

from sqlalchemy import String, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetboard.models.base import Base
from fleetboard.models.types import UTCDateTime
from fleetboard.timeutil import isoformat_utc, utcnow

if TYPE_CHECKING:
    from fleetboard.models.aircraft import Aircraft


class FlightStatus(str, Enum):
    """Operational status of a scheduled flight."""
    SCHEDULED = 'scheduled'
    IN_FLIGHT = 'in_flight'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'
    DELAYED = 'delayed'


class FlightRoute(Base):
    """
    One scheduled flight leg.

    Origin and destination are free-form location codes (normally IATA,
    e.g. 'JFK'). A route belongs to exactly one aircraft.
    """

    __tablename__ = 'flight_routes'

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    flight_number: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
        comment='Flight number (e.g., AA101)'
    )

    aircraft_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey('aircraft.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )

    origin: Mapped[str] = mapped_column(String(10), nullable=False)
    destination: Mapped[str] = mapped_column(String(10), nullable=False)

    departure_time: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        comment='Departure instant (UTC)'
    )

    arrival_time: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        comment='Arrival instant (UTC)'
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=FlightStatus.SCHEDULED.value,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=utcnow,
        onupdate=utcnow,
    )

    aircraft: Mapped[Optional['Aircraft']] = relationship(back_populates='routes')

    __table_args__ = (
        CheckConstraint('arrival_time > departure_time', name='ck_flight_routes_valid_times'),
        CheckConstraint(
            "status IN ('scheduled', 'in_flight', 'completed', 'cancelled', 'delayed')",
            name='ck_flight_routes_status',
        ),
        # Timeline query: one aircraft's legs in departure order
        Index('ix_flight_routes_aircraft_departure', 'aircraft_id', 'departure_time'),
    )

    def __repr__(self) -> str:
        return f'<FlightRoute {self.flight_number} {self.origin}->{self.destination}>'

    @property
    def block_hours(self) -> float:
        """Scheduled duration in hours."""
        return (self.arrival_time - self.departure_time).total_seconds() / 3600

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'id': self.id,
            'flight_number': self.flight_number,
            'aircraft_id': self.aircraft_id,
            'origin': self.origin,
            'destination': self.destination,
            'departure_time': isoformat_utc(self.departure_time),
            'arrival_time': isoformat_utc(self.arrival_time),
            'status': self.status,
            'created_at': isoformat_utc(self.created_at),
            'updated_at': isoformat_utc(self.updated_at),
        }
