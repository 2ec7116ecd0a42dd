"""
Custom column types.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

from fleetboard.timeutil import ensure_utc


class UTCDateTime(TypeDecorator):
    """
    DateTime column that always round-trips aware UTC values.

    SQLite has no timezone support, so values are stored as naive UTC
    and UTC is re-attached on load.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return ensure_utc(value).replace(tzinfo=None)

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)
