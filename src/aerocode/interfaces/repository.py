"""Repository interface for AEROCODE.

The repository is the sole persisted root: it holds every aircraft (keyed by
code) and every employee (keyed by id). Concrete adapters decide where the
state lives by implementing `_read` and `_write`; collection handling and
snapshots are shared here.
"""

from __future__ import annotations

import abc
import copy

from aerocode.domain.aggregates import Aircraft, Employee


class Repository(abc.ABC):
    """Contract and shared behavior for the aircraft/employee repository."""

    def __init__(self) -> None:
        self._aircraft: dict[str, Aircraft] = {}
        self._employees: dict[str, Employee] = {}
        self._snapshot: tuple[dict[str, Aircraft], dict[str, Employee]] = ({}, {})

    # --- Persistence ---

    def load(self) -> None:
        """Replace the in-memory state with the persisted state."""
        aircraft, employees = self._read()
        self._aircraft = {a.code: a for a in aircraft}
        self._employees = {e.id: e for e in employees}
        self._take_snapshot()

    def persist(self) -> None:
        """Write the full in-memory state, overwriting the persisted state."""
        self._write(list(self._aircraft.values()), list(self._employees.values()))
        self._take_snapshot()

    def discard_changes(self) -> None:
        """Restore the state captured by the last `load` or `persist`."""
        aircraft, employees = copy.deepcopy(self._snapshot)
        self._aircraft = aircraft
        self._employees = employees

    @abc.abstractmethod
    def _read(self) -> tuple[list[Aircraft], list[Employee]]:
        """Return the persisted aircraft and employees."""

    @abc.abstractmethod
    def _write(self, aircraft: list[Aircraft], employees: list[Employee]) -> None:
        """Persist the given aircraft and employees, replacing prior content."""

    # --- Aircraft ---

    def get_aircraft(self, code: str) -> Aircraft | None:
        return self._aircraft.get(code)

    def add_aircraft(self, aircraft: Aircraft) -> None:
        self._aircraft[aircraft.code] = aircraft

    def remove_aircraft(self, code: str) -> None:
        del self._aircraft[code]

    def list_aircraft(self) -> list[Aircraft]:
        return list(self._aircraft.values())

    # --- Employees ---

    def get_employee(self, employee_id: str) -> Employee | None:
        return self._employees.get(employee_id)

    def add_employee(self, employee: Employee) -> None:
        self._employees[employee.id] = employee

    def remove_employee(self, employee_id: str) -> None:
        del self._employees[employee_id]

    def list_employees(self) -> list[Employee]:
        return list(self._employees.values())

    def find_employee_by_credentials(
        self, username: str, password: str
    ) -> Employee | None:
        """Return the first employee whose username and password both match."""
        for employee in self._employees.values():
            if employee.has_credentials(username, password):
                return employee
        return None

    # --- Internal Helpers ---

    def _take_snapshot(self) -> None:
        self._snapshot = copy.deepcopy((self._aircraft, self._employees))
