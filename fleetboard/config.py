"""
Configuration management for FleetBoard.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()


ALLOWED_CHUNK_HOURS: Tuple[int, ...] = (6, 12, 24)


def _parse_chunk_hours(value: str) -> int:
    """Parse chunk size in hours, falling back to a full day if invalid."""
    try:
        hours = int(value)
    except (TypeError, ValueError):
        return 24
    return hours if hours in ALLOWED_CHUNK_HOURS else 24


@dataclass(frozen=True)
class DatabaseConfig:
    """Database configuration."""
    url: str = os.getenv('DATABASE_URL', 'sqlite:///fleetboard.db')

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith('sqlite')


@dataclass(frozen=True)
class TimelineConfig:
    """Gantt timeline defaults."""
    default_chunk_hours: int = _parse_chunk_hours(os.getenv('DEFAULT_CHUNK_HOURS', '24'))

    # Window shown when the caller gives no dates: today plus N more days
    default_extra_days: int = 1

    # Upper bound on requested window length, keeps label output bounded
    max_days: int = int(os.getenv('TIMELINE_MAX_DAYS', '31'))


@dataclass(frozen=True)
class AuthConfig:
    """
    Role-based authorization settings.

    Authentication happens upstream; the proxy forwards the caller's
    role in a request header.
    """
    role_header: str = os.getenv('ROLE_HEADER', 'X-User-Role')
    enforce_roles: bool = os.getenv('ENFORCE_ROLES', '1') == '1'


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    database: DatabaseConfig
    timeline: TimelineConfig
    auth: AuthConfig

    # Flask settings
    secret_key: str
    debug: bool


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    return AppConfig(
        database=DatabaseConfig(),
        timeline=TimelineConfig(),
        auth=AuthConfig(),
        secret_key=os.getenv('SECRET_KEY', 'dev-key-change-in-prod'),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
