"""
FleetBoard Backend Package.

Aircraft fleet and flight schedule service built with Flask, SQLAlchemy,
and NumPy, serving a chunked Gantt timeline.

Modules:
    api/         REST endpoints for aircraft, routes, timeline and metrics
    models/      SQLAlchemy ORM models (Aircraft, FlightRoute)
    timeline/    Window, event positioning and label/separator layout
    analytics/   NumPy-based block hour and utilization statistics
    seed.py      Sample fleet and schedule for local development
    config.py    Centralized configuration from environment variables
"""

__version__ = '1.0.0'
