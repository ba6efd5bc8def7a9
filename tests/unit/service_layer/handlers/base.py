"""Base class for handler tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING

import pytest

from aerocode.adapters.report_store import MemoryReportStore
from aerocode.domain.value_objects import PermissionLevel
from aerocode.service_layer.session import Session

if TYPE_CHECKING:
    from aerocode.domain.aggregates import Aircraft, Employee
    from aerocode.interfaces.repository import Repository
    from aerocode.service_layer.messagebus import MessageBus


class HandlerTestBase:
    """Base class for handler tests providing common setup and utilities.

    Each test gets a fresh bus over an empty in-memory repository, a memory
    report store and a guest session. `login_as` seeds an employee of the
    given level and authenticates the session with it.
    """

    bus: MessageBus
    session: Session
    report_store: MemoryReportStore

    # declare what fixtures seeding needs (subclasses can override)
    seed_uses: tuple[str, ...] = ()
    fx: SimpleNamespace

    @pytest.fixture(autouse=True)
    def _attach_bus(self, request, make_test_bus):
        """Fresh bus per test; seed using any fixtures declared in seed_uses."""
        self.report_store = MemoryReportStore()
        self.bus = make_test_bus(report_store=self.report_store)
        self.session = Session()

        # Make a handy namespace of requested fixtures available as self.fx
        fx = {name: request.getfixturevalue(name) for name in self.seed_uses}
        self.fx = SimpleNamespace(**fx)

        self._seed_bus(request)  # generic: can pull *any* fixture by name
        self.reset_committed()

    def _seed_bus(self, request) -> None:
        """Override to preload the bus. Use request.getfixturevalue(...) as needed."""

    # --- Seeding ---

    @property
    def repository(self) -> Repository:
        return self.bus.uow.repository

    def seed_employee(self, employee: Employee) -> Employee:
        """Store an employee directly, bypassing access checks."""
        self.repository.add_employee(employee)
        self.repository.persist()
        return employee

    def seed_aircraft(self, aircraft: Aircraft) -> Aircraft:
        """Store an aircraft directly, bypassing access checks."""
        self.repository.add_aircraft(aircraft)
        self.repository.persist()
        return aircraft

    def login_as(self, make_employee, level: PermissionLevel) -> Employee:
        """Seed an employee at ``level`` and log the session in as them."""
        employee = self.seed_employee(make_employee(level=level))
        self.session.login(employee)
        return employee

    def handle(self, cmd):
        return self.bus.handle(cmd, self.session)

    # --- Assertions ---

    def assert_committed(self) -> None:
        """Assert that the unit of work was committed."""
        assert hasattr(self.bus.uow, "committed")
        assert self.bus.uow.committed is True

    def assert_not_committed(self) -> None:
        """Assert that the unit of work was not committed."""
        assert hasattr(self.bus.uow, "committed")
        assert self.bus.uow.committed is False

    def reset_committed(self) -> None:
        """Reset the committed flag on the unit of work."""
        if hasattr(self.bus.uow, "committed"):
            self.bus.uow.committed = False
