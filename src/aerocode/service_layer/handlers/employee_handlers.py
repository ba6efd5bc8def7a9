"""Handlers related to employees."""

import logging
from collections.abc import Callable

from aerocode.domain.aggregates import Employee
from aerocode.domain.errors import EmployeeNotFoundError
from aerocode.interfaces.id_generator import IdGenerator
from aerocode.interfaces.unit_of_work import AbstractUnitOfWork
from aerocode.service_layer import commands
from aerocode.service_layer.access import ADMIN_ONLY, require_auth
from aerocode.service_layer.session import Session

from .common import new_unique_id

logger = logging.getLogger(__name__)

EMPLOYEE_ID_PREFIX = "F-"


def create_employee(
    cmd: commands.CreateEmployee,
    session: Session,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> str:
    """Register a new employee. Open to anyone, logged in or not.

    Returns:
        The id of the new employee.
    """
    with uow:
        taken = {e.id for e in uow.repository.list_employees()}
        employee = Employee(
            id=new_unique_id(id_generator, EMPLOYEE_ID_PREFIX, taken),
            name=cmd.name,
            phone=cmd.phone,
            address=cmd.address,
            username=cmd.username,
            password=cmd.password,
            level=cmd.level,
        )
        uow.repository.add_employee(employee)
        uow.commit()

    logger.info("Created employee %s (%s)", employee.id, employee.level.value)
    return employee.id


def delete_employee(
    cmd: commands.DeleteEmployee, session: Session, uow: AbstractUnitOfWork
) -> None:
    """Remove an employee.

    Stage assignments that reference the employee are left in place.
    """
    require_auth(session, ADMIN_ONLY)

    with uow:
        if uow.repository.get_employee(cmd.employee_id) is None:
            raise EmployeeNotFoundError(cmd.employee_id)
        uow.repository.remove_employee(cmd.employee_id)
        uow.commit()

    logger.info("Deleted employee %s", cmd.employee_id)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.CreateEmployee: create_employee,
    commands.DeleteEmployee: delete_employee,
}
