"""
API module for FleetBoard.

Provides REST endpoints for:
- Aircraft (fleet management)
- Flight routes (scheduling)
- Gantt timeline layout
- Fleet metrics and system status
"""

from fleetboard.api.aircraft import aircraft_bp
from fleetboard.api.routes import routes_bp
from fleetboard.api.timeline import timeline_bp
from fleetboard.api.metrics import metrics_bp

__all__ = ['aircraft_bp', 'routes_bp', 'timeline_bp', 'metrics_bp']
