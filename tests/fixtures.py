from datetime import datetime, timezone

from fleetboard.models import Aircraft, FlightRoute


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def make_aircraft(aircraft_id: str, registration: str, status: str = 'active') -> Aircraft:
    return Aircraft(id=aircraft_id, registration=registration, aircraft_type='Airbus A320', status=status)


def make_route(route_id: str, aircraft_id: str, departure: datetime, arrival: datetime,
               status: str = 'scheduled') -> FlightRoute:
    return FlightRoute(
        id=route_id,
        flight_number=route_id.upper(),
        aircraft_id=aircraft_id,
        origin='JFK',
        destination='LAX',
        departure_time=departure,
        arrival_time=arrival,
        status=status,
    )
