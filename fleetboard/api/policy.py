"""
Role-based access rules.

Callers are authenticated upstream; the caller's role arrives in a
request header (ROLE_HEADER, default X-User-Role). Rules:

    aircraft  read: any role   write: admin, controller, planner   delete: admin
    routes    read: any role   write: any role                     delete: admin, controller
"""

import logging
from enum import Enum
from functools import wraps
from typing import Optional

from flask import jsonify, request, g

from fleetboard.config import config

logger = logging.getLogger(__name__)


class Role(str, Enum):
    ADMIN = 'admin'
    CONTROLLER = 'controller'
    PLANNER = 'planner'


ALL_ROLES = tuple(Role)


def current_role() -> Optional[Role]:
    raw = (request.headers.get(config.auth.role_header) or '').strip().lower()
    try:
        return Role(raw)
    except ValueError:
        return None


def require_role(*roles: Role):
    """
    Reject the request unless the caller holds one of roles.

    With no roles given, any recognised role is accepted. Disabled
    entirely when ENFORCE_ROLES=0.
    """
    allowed = roles or ALL_ROLES

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if not config.auth.enforce_roles:
                g.role = None
                return fn(*args, **kwargs)

            role = current_role()
            if role is None:
                return jsonify({'error': 'Authentication required'}), 401
            if role not in allowed:
                logger.info(f'Role {role.value} denied for {request.method} {request.path}')
                return jsonify({'error': 'Insufficient role'}), 403

            g.role = role
            return fn(*args, **kwargs)
        return wrapper
    return decorator
