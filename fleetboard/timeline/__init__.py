"""
Gantt timeline layout.

Pure computation over the chunked timeline grid:
- window       Whole-UTC-day window and chunk count
- positioning  Departure/arrival to left/width percentages
- labels       Date headers, hour ticks and separators
- board        Per-aircraft rows for the API
"""

from fleetboard.timeline.window import (
    TimelineWindow,
    calculate_window,
    default_date_range,
    normalize_date_range,
)
from fleetboard.timeline.positioning import EventPosition, position_event
from fleetboard.timeline.labels import chunk_date_labels, hour_ticks, separators
from fleetboard.timeline.board import GanttBoard, build_board

__all__ = [
    'TimelineWindow',
    'calculate_window',
    'default_date_range',
    'normalize_date_range',
    'EventPosition',
    'position_event',
    'chunk_date_labels',
    'hour_ticks',
    'separators',
    'GanttBoard',
    'build_board',
]
