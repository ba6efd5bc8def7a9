"""Handlers related to aircraft tests (electrical, hydraulic, aerodynamic)."""

import logging
from collections.abc import Callable

from aerocode.domain.aggregates import Test
from aerocode.interfaces.id_generator import IdGenerator
from aerocode.interfaces.unit_of_work import AbstractUnitOfWork
from aerocode.service_layer import commands
from aerocode.service_layer.access import ENGINEERING, require_auth
from aerocode.service_layer.session import Session

from .common import get_aircraft_or_raise, new_unique_id

logger = logging.getLogger(__name__)

TEST_ID_PREFIX = "T-"


def add_test(
    cmd: commands.AddTest,
    session: Session,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> str:
    """Add a test with no result yet. Returns the test id."""
    require_auth(session, ENGINEERING)

    with uow:
        aircraft = get_aircraft_or_raise(uow.repository, cmd.code)
        test = Test(
            id=new_unique_id(id_generator, TEST_ID_PREFIX, aircraft.owned_ids()),
            kind=cmd.kind,
        )
        aircraft.add_test(test)
        uow.commit()

    logger.info("Added %s test %s to aircraft %s", test.kind.value, test.id, cmd.code)
    return test.id


def set_test_result(
    cmd: commands.SetTestResult, session: Session, uow: AbstractUnitOfWork
) -> None:
    """Record a test result. A previously recorded result is overwritten."""
    require_auth(session, ENGINEERING)

    with uow:
        aircraft = get_aircraft_or_raise(uow.repository, cmd.code)
        aircraft.record_test_result(cmd.test_id, cmd.result)
        uow.commit()

    logger.info(
        "Recorded %s for test %s of aircraft %s",
        cmd.result.value,
        cmd.test_id,
        cmd.code,
    )


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.AddTest: add_test,
    commands.SetTestResult: set_test_result,
}
