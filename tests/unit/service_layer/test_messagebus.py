"""Unit tests for the MessageBus."""

import logging
import re
from dataclasses import dataclass
from functools import partial

import pytest

from aerocode.adapters.repository import InMemoryRepository
from aerocode.adapters.unit_of_work import RepositoryUnitOfWork
from aerocode.domain.errors import AircraftNotFoundError
from aerocode.service_layer.commands import Command
from aerocode.service_layer.errors import AuthRequiredError
from aerocode.service_layer.messagebus import MessageBus, NoHandlerForCommand
from aerocode.service_layer.session import Session

# pylint: disable=unused-argument, too-few-public-methods


@dataclass(frozen=True)
class InspectAircraft(Command):
    """Stand-in command carrying an aircraft code."""

    code: str = "AC-1"


@dataclass(frozen=True)
class CountParts(Command):
    """Second stand-in command, to check routing by type."""

    code: str = "AC-1"


def record_inspection(cmd: InspectAircraft, session: Session, sink: list) -> str:
    """Handler with an injected dependency, as bootstrap would bind it."""
    sink.append(cmd)
    return cmd.code


class CallableHandler:
    """A handler object without ``__name__``."""

    def __call__(self, cmd, session):
        return None


@pytest.fixture(name="uow")
def _uow() -> RepositoryUnitOfWork:
    return RepositoryUnitOfWork(InMemoryRepository())


def messages_at(caplog, level: int) -> list[str]:
    """Messages logged at exactly ``level``."""
    return [rec.getMessage() for rec in caplog.records if rec.levelno == level]


def test_routes_by_command_type(uow):
    """Only the handler registered for the command's type runs."""
    inspected: list[Command] = []
    counted: list[Command] = []
    bus = MessageBus(
        uow,
        command_handlers={
            InspectAircraft: lambda cmd, session: inspected.append(cmd),
            CountParts: lambda cmd, session: counted.append(cmd),
        },
    )

    bus.handle(CountParts("AC-7"), Session())

    assert not inspected
    assert counted == [CountParts("AC-7")]


def test_handler_gets_session_and_result_is_returned(uow):
    """The caller's session reaches the handler; its return value comes back."""
    sessions: list[Session] = []

    def handler(cmd: InspectAircraft, session: Session) -> str:
        sessions.append(session)
        return f"checked {cmd.code}"

    session = Session()
    bus = MessageBus(uow, command_handlers={InspectAircraft: handler})

    assert bus.handle(InspectAircraft("AC-3"), session) == "checked AC-3"
    assert sessions == [session]


def test_unregistered_command_raises(uow, caplog):
    """An unknown command type is logged at ERROR and raised."""
    bus = MessageBus(uow, command_handlers={})
    with caplog.at_level(logging.ERROR):
        with pytest.raises(NoHandlerForCommand, match="InspectAircraft"):
            bus.handle(InspectAircraft(), Session())
    assert messages_at(caplog, logging.ERROR) == [
        "No handler found for command InspectAircraft"
    ]


@pytest.mark.parametrize("error", [AircraftNotFoundError("AC-9"), AuthRequiredError()])
def test_rejections_are_logged_at_info(uow, caplog, error):
    """Domain and access refusals propagate but are not treated as failures."""

    def refuse(cmd, session):
        raise error

    bus = MessageBus(uow, command_handlers={InspectAircraft: refuse})
    with caplog.at_level(logging.DEBUG):
        with pytest.raises(type(error)):
            bus.handle(InspectAircraft(), Session())

    assert f"Command InspectAircraft rejected: {error}" in messages_at(
        caplog, logging.INFO
    )
    assert not messages_at(caplog, logging.ERROR)


def test_unexpected_exception_is_logged_with_traceback(uow, caplog):
    """Other exceptions propagate and are logged with exc_info."""

    def crash(cmd, session):
        raise RuntimeError("disk on fire")

    bus = MessageBus(uow, command_handlers={InspectAircraft: crash})
    with caplog.at_level(logging.ERROR):
        with pytest.raises(RuntimeError, match="disk on fire"):
            bus.handle(InspectAircraft("AC-2"), Session())

    (record,) = [rec for rec in caplog.records if rec.levelno == logging.ERROR]
    assert record.getMessage() == (
        "Exception handling command InspectAircraft(code='AC-2') with handler crash"
    )
    assert record.exc_info is not None


def test_partial_handler_logs_wrapped_function_name(uow, caplog):
    """Injected handlers are logged under the function they wrap."""
    sink: list[InspectAircraft] = []
    bus = MessageBus(
        uow,
        command_handlers={InspectAircraft: partial(record_inspection, sink=sink)},
    )
    with caplog.at_level(logging.DEBUG):
        assert bus.handle(InspectAircraft("AC-5"), Session()) == "AC-5"

    assert sink == [InspectAircraft("AC-5")]
    assert (
        "Handling command InspectAircraft(code='AC-5') with handler record_inspection"
        in messages_at(caplog, logging.DEBUG)
    )


def test_nameless_handler_logs_repr(uow, caplog):
    """A handler without a name is logged by its repr."""
    bus = MessageBus(uow, command_handlers={InspectAircraft: CallableHandler()})
    with caplog.at_level(logging.DEBUG):
        bus.handle(InspectAircraft(), Session())
    assert any(
        re.fullmatch(r"Handling command InspectAircraft\(.*\) with handler <.*>", msg)
        for msg in messages_at(caplog, logging.DEBUG)
    )


def test_exposes_uow(uow):
    """Views reach the repository through bus.uow."""
    assert MessageBus(uow, command_handlers={}).uow is uow
