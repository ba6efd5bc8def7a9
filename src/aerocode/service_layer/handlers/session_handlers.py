"""Handlers for logging in and out."""

import logging
from collections.abc import Callable

from aerocode.interfaces.unit_of_work import AbstractUnitOfWork
from aerocode.service_layer import commands
from aerocode.service_layer.session import Session

logger = logging.getLogger(__name__)


def login(cmd: commands.Login, session: Session, uow: AbstractUnitOfWork) -> bool:
    """Authenticate against the stored employees.

    A failed login does not raise: it returns False and leaves the session
    as it was.

    Returns:
        True if an employee matched both username and password.
    """
    with uow:
        employee = uow.repository.find_employee_by_credentials(
            cmd.username, cmd.password
        )
    if employee is None:
        logger.info("Login failed for user %r", cmd.username)
        return False
    session.login(employee)
    logger.info("Logged in as %s (%s)", employee.name, employee.level.value)
    return True


def logout(
    cmd: commands.Logout,  # pylint: disable=unused-argument
    session: Session,
) -> None:
    """Clear the session unconditionally."""
    session.logout()
    logger.info("Logged out")


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.Login: login,
    commands.Logout: logout,
}
