"""
Database models for FleetBoard.

Two tables back the application:
1. aircraft - the managed fleet
2. flight_routes - scheduled legs, each owned by one aircraft
"""

from fleetboard.models.base import Base, SessionLocal, init_db, init_engine, get_session
from fleetboard.models.aircraft import Aircraft, AircraftStatus
from fleetboard.models.flight_route import FlightRoute, FlightStatus

__all__ = [
    'Base',
    'SessionLocal',
    'init_db',
    'init_engine',
    'get_session',
    'Aircraft',
    'AircraftStatus',
    'FlightRoute',
    'FlightStatus',
]
