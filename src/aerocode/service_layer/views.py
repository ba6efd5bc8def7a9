"""Read-only views over the repository.

Views need no authentication and never mutate state.
"""

from __future__ import annotations

from typing import Any

from aerocode.domain.aggregates import Stage
from aerocode.domain.errors import AircraftNotFoundError
from aerocode.interfaces.repository import Repository


def list_aircraft(repository: Repository) -> list[dict[str, Any]]:
    """Summarize every aircraft: identity plus part/stage/test counts."""
    return [
        {
            "code": a.code,
            "model": a.model,
            "type": a.type.value,
            "parts": len(a.parts),
            "stages": len(a.stages),
            "tests": len(a.tests),
        }
        for a in repository.list_aircraft()
    ]


def aircraft_details(repository: Repository, code: str) -> dict[str, Any]:
    """Describe one aircraft with its parts, stages and tests.

    Assignees whose employee has since been deleted are kept as tombstones
    (``name`` is None and ``removed`` is True).

    Raises:
        AircraftNotFoundError: If no aircraft has this code.
    """
    if (aircraft := repository.get_aircraft(code)) is None:
        raise AircraftNotFoundError(code)
    return {
        "code": aircraft.code,
        "model": aircraft.model,
        "type": aircraft.type.value,
        "capacity": aircraft.capacity,
        "range": aircraft.range,
        "client": aircraft.client,
        "delivery_date": aircraft.delivery_date,
        "parts": [
            {
                "id": p.id,
                "name": p.name,
                "type": p.type.value,
                "supplier": p.supplier,
                "status": p.status.value,
            }
            for p in aircraft.parts
        ],
        "stages": [
            {
                "id": s.id,
                "name": s.name,
                "deadline": s.deadline,
                "status": s.status.value,
                "assignees": _resolve_assignees(repository, s),
            }
            for s in aircraft.stages
        ],
        "tests": [
            {
                "id": t.id,
                "kind": t.kind.value,
                "result": t.result.value if t.result else None,
            }
            for t in aircraft.tests
        ],
    }


def _resolve_assignees(repository: Repository, stage: Stage) -> list[dict[str, Any]]:
    resolved = []
    for employee_id in stage.assignees:
        employee = repository.get_employee(employee_id)
        resolved.append(
            {
                "id": employee_id,
                "name": employee.name if employee else None,
                "removed": employee is None,
            }
        )
    return resolved
