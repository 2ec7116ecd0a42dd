"""
Aircraft model - the managed fleet.

Each row is one airframe identified by its tail registration. Aircraft
are created and edited by operations staff; only admins may delete one,
and deleting it removes its scheduled routes.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import List, TYPE_CHECKING

from sqlalchemy import String, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetboard.models.base import Base
from fleetboard.models.types import UTCDateTime
from fleetboard.timeutil import isoformat_utc, utcnow

if TYPE_CHECKING:
    from fleetboard.models.flight_route import FlightRoute


class AircraftStatus(str, Enum):
    """
    Lifecycle status of an airframe.

    Only ACTIVE aircraft appear as rows on the Gantt timeline.
    """
    ACTIVE = 'active'
    MAINTENANCE = 'maintenance'
    INACTIVE = 'inactive'


class Aircraft(Base):
    """
    A fleet aircraft.

    Fields:
        id: UUID string primary key
        registration: Tail number (e.g., 'N123AB'), unique across the fleet
        aircraft_type: Free-text type (e.g., 'Boeing 737-800')
        status: One of AircraftStatus values
    """

    __tablename__ = 'aircraft'

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    # Registration / tail number
    registration: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        unique=True,
        index=True,
        comment='Aircraft registration (tail number)'
    )

    aircraft_type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment='Aircraft type name'
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=AircraftStatus.ACTIVE.value,
        index=True,
    )

    # Metadata
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=utcnow,
        comment='Record creation timestamp'
    )

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=utcnow,
        onupdate=utcnow,
        comment='Last update timestamp'
    )

    routes: Mapped[List['FlightRoute']] = relationship(
        back_populates='aircraft',
        cascade='all, delete-orphan',
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('active', 'maintenance', 'inactive')",
            name='ck_aircraft_status',
        ),
    )

    def __repr__(self) -> str:
        return f'<Aircraft {self.registration} {self.aircraft_type} ({self.status})>'

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'id': self.id,
            'registration': self.registration,
            'aircraft_type': self.aircraft_type,
            'status': self.status,
            'created_at': isoformat_utc(self.created_at),
            'updated_at': isoformat_utc(self.updated_at),
        }
