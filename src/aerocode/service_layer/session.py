"""Session holding the currently authenticated employee."""

from __future__ import annotations

from dataclasses import dataclass

from aerocode.domain.aggregates import Employee
from aerocode.domain.value_objects import PermissionLevel


@dataclass
class Session:
    """Process-local session passed along with every command.

    Holds at most one authenticated employee. It is never persisted.
    """

    employee: Employee | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.employee is not None

    @property
    def level(self) -> PermissionLevel | None:
        """Permission level of the logged-in employee, if any."""
        return self.employee.level if self.employee else None

    def login(self, employee: Employee) -> None:
        self.employee = employee

    def logout(self) -> None:
        self.employee = None
