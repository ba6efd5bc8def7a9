"""Handlers driving the stage state machine."""

import logging
from collections.abc import Callable

from aerocode.domain.errors import EmployeeNotFoundError
from aerocode.interfaces.unit_of_work import AbstractUnitOfWork
from aerocode.service_layer import commands
from aerocode.service_layer.access import ENGINEERING, SHOP_FLOOR, require_auth
from aerocode.service_layer.session import Session

from .common import get_aircraft_or_raise

logger = logging.getLogger(__name__)


def start_stage(
    cmd: commands.StartStage, session: Session, uow: AbstractUnitOfWork
) -> None:
    """Move a stage to IN_PROGRESS once its predecessor is done."""
    require_auth(session, SHOP_FLOOR)

    with uow:
        aircraft = get_aircraft_or_raise(uow.repository, cmd.code)
        aircraft.start_stage(cmd.stage_id)
        uow.commit()

    logger.info("Started stage %s of aircraft %s", cmd.stage_id, cmd.code)


def finish_stage(
    cmd: commands.FinishStage, session: Session, uow: AbstractUnitOfWork
) -> None:
    """Move an IN_PROGRESS stage to DONE."""
    require_auth(session, ENGINEERING)

    with uow:
        aircraft = get_aircraft_or_raise(uow.repository, cmd.code)
        aircraft.finish_stage(cmd.stage_id)
        uow.commit()

    logger.info("Finished stage %s of aircraft %s", cmd.stage_id, cmd.code)


def assign_employee(
    cmd: commands.AssignEmployee, session: Session, uow: AbstractUnitOfWork
) -> None:
    """Assign an existing employee to a stage (no-op if already assigned)."""
    require_auth(session, ENGINEERING)

    with uow:
        aircraft = get_aircraft_or_raise(uow.repository, cmd.code)
        stage = aircraft.find_stage(cmd.stage_id)
        if uow.repository.get_employee(cmd.employee_id) is None:
            raise EmployeeNotFoundError(cmd.employee_id)
        stage.assign(cmd.employee_id)
        uow.commit()

    logger.info(
        "Assigned employee %s to stage %s of aircraft %s",
        cmd.employee_id,
        cmd.stage_id,
        cmd.code,
    )


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.StartStage: start_stage,
    commands.FinishStage: finish_stage,
    commands.AssignEmployee: assign_employee,
}
