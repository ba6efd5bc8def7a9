"""Role based access control for domain operations."""

from __future__ import annotations

from collections.abc import Collection

from aerocode.domain.value_objects import PermissionLevel

from .errors import AuthRequiredError, PermissionDeniedError
from .session import Session

ADMIN_ONLY = frozenset({PermissionLevel.ADMIN})
ENGINEERING = frozenset({PermissionLevel.ADMIN, PermissionLevel.ENGINEER})
SHOP_FLOOR = frozenset(
    {PermissionLevel.ADMIN, PermissionLevel.ENGINEER, PermissionLevel.OPERATOR}
)


def require_auth(session: Session, allowed: Collection[PermissionLevel]) -> None:
    """Check that the session may run an operation gated on ``allowed`` levels.

    Raises:
        AuthRequiredError: If nobody is logged in.
        PermissionDeniedError: If the logged-in employee's level is not allowed.
    """
    if session.employee is None:
        raise AuthRequiredError()
    if session.employee.level not in allowed:
        raise PermissionDeniedError(
            session.employee.level.value,
            tuple(level.value for level in PermissionLevel if level in allowed),
        )
