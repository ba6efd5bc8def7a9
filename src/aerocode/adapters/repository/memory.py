"""In-memory repository implementation for testing purposes."""

from __future__ import annotations

import copy

from aerocode.domain.aggregates import Aircraft, Employee
from aerocode.interfaces.repository import Repository


class InMemoryRepository(Repository):
    """Repository whose persisted state is a pair of in-memory lists.

    ``persist_count`` records how many times the state was written, which
    lets tests assert that an operation persisted (or did not).
    """

    def __init__(
        self,
        aircraft: list[Aircraft] | None = None,
        employees: list[Employee] | None = None,
    ) -> None:
        super().__init__()
        self._stored: tuple[list[Aircraft], list[Employee]] = (
            list(aircraft or []),
            list(employees or []),
        )
        self.persist_count = 0
        self.load()

    def _read(self) -> tuple[list[Aircraft], list[Employee]]:
        return copy.deepcopy(self._stored)

    def _write(self, aircraft: list[Aircraft], employees: list[Employee]) -> None:
        self._stored = copy.deepcopy((aircraft, employees))
        self.persist_count += 1
