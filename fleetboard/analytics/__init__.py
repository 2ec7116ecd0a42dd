"""
Analytics module for FleetBoard.

NumPy-based summaries of the fleet schedule:
- Block hour distribution
- Per-aircraft utilization within a window
- Overlapping-leg detection
"""

from fleetboard.analytics.fleet_analysis import (
    FleetAnalyzer,
    AircraftUtilization,
    BlockHourStats,
)

__all__ = [
    'FleetAnalyzer',
    'AircraftUtilization',
    'BlockHourStats',
]
