"""Handlers related to aircraft and the parts and stages they own."""

import logging
from collections.abc import Callable

from aerocode.domain.aggregates import Aircraft, Part, Stage
from aerocode.domain.errors import DuplicateCodeError
from aerocode.interfaces.id_generator import IdGenerator
from aerocode.interfaces.unit_of_work import AbstractUnitOfWork
from aerocode.service_layer import commands
from aerocode.service_layer.access import ENGINEERING, require_auth
from aerocode.service_layer.session import Session

from .common import get_aircraft_or_raise, new_unique_id

logger = logging.getLogger(__name__)

PART_ID_PREFIX = "P-"
STAGE_ID_PREFIX = "E-"


def create_aircraft(
    cmd: commands.CreateAircraft, session: Session, uow: AbstractUnitOfWork
) -> str:
    """Register a new aircraft with no parts, stages or tests.

    Returns:
        The aircraft code.

    Raises:
        DuplicateCodeError: If an aircraft with the same code exists.
    """
    require_auth(session, ENGINEERING)

    with uow:
        if uow.repository.get_aircraft(cmd.code) is not None:
            raise DuplicateCodeError(cmd.code)
        aircraft = Aircraft(
            code=cmd.code,
            model=cmd.model,
            type=cmd.type,
            capacity=cmd.capacity,
            range=cmd.range,
        )
        uow.repository.add_aircraft(aircraft)
        uow.commit()

    logger.info("Created aircraft %s (%s)", aircraft.code, aircraft.model)
    return aircraft.code


def delete_aircraft(
    cmd: commands.DeleteAircraft, session: Session, uow: AbstractUnitOfWork
) -> None:
    """Remove an aircraft along with its parts, stages and tests."""
    require_auth(session, ENGINEERING)

    with uow:
        get_aircraft_or_raise(uow.repository, cmd.code)
        uow.repository.remove_aircraft(cmd.code)
        uow.commit()

    logger.info("Deleted aircraft %s", cmd.code)


def add_part(
    cmd: commands.AddPart,
    session: Session,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> str:
    """Add a part, initially IN_PRODUCTION. Returns the part id."""
    require_auth(session, ENGINEERING)

    with uow:
        aircraft = get_aircraft_or_raise(uow.repository, cmd.code)
        part = Part(
            id=new_unique_id(id_generator, PART_ID_PREFIX, aircraft.owned_ids()),
            name=cmd.name,
            type=cmd.type,
            supplier=cmd.supplier,
        )
        aircraft.add_part(part)
        uow.commit()

    logger.info("Added part %s to aircraft %s", part.id, cmd.code)
    return part.id


def add_stage(
    cmd: commands.AddStage,
    session: Session,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> str:
    """Append a PENDING stage after the existing ones. Returns the stage id."""
    require_auth(session, ENGINEERING)

    with uow:
        aircraft = get_aircraft_or_raise(uow.repository, cmd.code)
        stage = Stage(
            id=new_unique_id(id_generator, STAGE_ID_PREFIX, aircraft.owned_ids()),
            name=cmd.name,
            deadline=cmd.deadline,
        )
        aircraft.add_stage(stage)
        uow.commit()

    logger.info("Added stage %s to aircraft %s", stage.id, cmd.code)
    return stage.id


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.CreateAircraft: create_aircraft,
    commands.DeleteAircraft: delete_aircraft,
    commands.AddPart: add_part,
    commands.AddStage: add_stage,
}
