"""Conversions between aggregates and their JSON document shapes."""

from __future__ import annotations

from typing import Any

from aerocode.domain.aggregates import Aircraft, Employee, Part, Stage, Test
from aerocode.domain.value_objects import (
    AircraftType,
    PartStatus,
    PartType,
    PermissionLevel,
    StageStatus,
    TestKind,
    TestResult,
)


class RecordMapper:
    """Maps aggregates to plain JSON-ready dicts and back.

    ``from_*`` methods are strict: a missing key raises ``KeyError`` and an
    unknown enum value raises ``ValueError``. Callers decide how to treat a
    malformed document.
    """

    # --- Aircraft ---

    @staticmethod
    def aircraft_to_dict(aircraft: Aircraft) -> dict[str, Any]:
        """Convert an Aircraft to a dict."""
        return {
            "code": aircraft.code,
            "model": aircraft.model,
            "type": aircraft.type.value,
            "capacity": aircraft.capacity,
            "range": aircraft.range,
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
                    "assignees": list(s.assignees),
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
            "client": aircraft.client,
            "delivery_date": aircraft.delivery_date,
        }

    @staticmethod
    def aircraft_from_dict(data: dict[str, Any]) -> Aircraft:
        """Convert a dict back to an Aircraft."""
        return Aircraft(
            code=data["code"],
            model=data["model"],
            type=AircraftType(data["type"]),
            capacity=int(data["capacity"]),
            range=float(data["range"]),
            parts=[
                Part(
                    id=p["id"],
                    name=p["name"],
                    type=PartType(p["type"]),
                    supplier=p["supplier"],
                    status=PartStatus(p.get("status", PartStatus.IN_PRODUCTION.value)),
                )
                for p in data.get("parts", [])
            ],
            stages=[
                Stage(
                    id=s["id"],
                    name=s["name"],
                    deadline=s["deadline"],
                    status=StageStatus(s.get("status", StageStatus.PENDING.value)),
                    assignees=list(s.get("assignees", [])),
                )
                for s in data.get("stages", [])
            ],
            tests=[
                Test(
                    id=t["id"],
                    kind=TestKind(t["kind"]),
                    result=TestResult(t["result"]) if t.get("result") else None,
                )
                for t in data.get("tests", [])
            ],
            client=data.get("client"),
            delivery_date=data.get("delivery_date"),
        )

    # --- Employees ---

    @staticmethod
    def employee_to_dict(employee: Employee) -> dict[str, Any]:
        """Convert an Employee to a dict."""
        return {
            "id": employee.id,
            "name": employee.name,
            "phone": employee.phone,
            "address": employee.address,
            "username": employee.username,
            "password": employee.password,
            "level": employee.level.value,
        }

    @staticmethod
    def employee_from_dict(data: dict[str, Any]) -> Employee:
        """Convert a dict back to an Employee."""
        return Employee(
            id=data["id"],
            name=data["name"],
            phone=data["phone"],
            address=data["address"],
            username=data["username"],
            password=data["password"],
            level=PermissionLevel(data["level"]),
        )
