"""Handlers related to delivery reports."""

import logging
from collections.abc import Callable
from datetime import datetime

from aerocode.interfaces.report_store import ReportStore
from aerocode.interfaces.unit_of_work import AbstractUnitOfWork
from aerocode.service_layer import commands
from aerocode.service_layer.access import ENGINEERING, require_auth
from aerocode.service_layer.report import render_report
from aerocode.service_layer.session import Session

from .common import get_aircraft_or_raise

logger = logging.getLogger(__name__)


def generate_report(
    cmd: commands.GenerateReport,
    session: Session,
    uow: AbstractUnitOfWork,
    report_store: ReportStore,
    clock: Callable[[], datetime],
) -> str:
    """Record client and delivery date, then write the aircraft report.

    Returns:
        Where the report was written.
    """
    require_auth(session, ENGINEERING)

    with uow:
        aircraft = get_aircraft_or_raise(uow.repository, cmd.code)
        aircraft.set_delivery(cmd.client, cmd.delivery_date)
        uow.commit()
        text = render_report(aircraft, generated_at=clock())

    location = report_store.write(aircraft.code, text)
    logger.info("Generated report for aircraft %s at %s", aircraft.code, location)
    return location


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.GenerateReport: generate_report,
}
