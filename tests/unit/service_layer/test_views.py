"""Unit tests for the read-only views."""

import pytest

from aerocode.adapters.repository import InMemoryRepository
from aerocode.domain.errors import AircraftNotFoundError
from aerocode.service_layer import views

# pylint: disable=magic-value-comparison


def test_list_aircraft_summaries(make_aircraft, populated_aircraft):
    """Each aircraft is summarized with child counts."""
    repository = InMemoryRepository(aircraft=[make_aircraft("AC-1"), populated_aircraft])
    assert views.list_aircraft(repository) == [
        {
            "code": "AC-1",
            "model": "A320",
            "type": "COMMERCIAL",
            "parts": 0,
            "stages": 0,
            "tests": 0,
        },
        {
            "code": "AC-9",
            "model": "A320",
            "type": "COMMERCIAL",
            "parts": 1,
            "stages": 2,
            "tests": 2,
        },
    ]


def test_list_aircraft_empty():
    """No aircraft gives an empty list."""
    assert views.list_aircraft(InMemoryRepository()) == []


def test_details_resolve_assignees(make_employee, populated_aircraft):
    """Known assignees get their name; deleted ones are tombstones."""
    alice = make_employee(id="F-001", name="Alice")
    repository = InMemoryRepository(aircraft=[populated_aircraft], employees=[alice])

    details = views.aircraft_details(repository, "AC-9")

    assert details["stages"][0]["assignees"] == [
        {"id": "F-001", "name": "Alice", "removed": False},
        {"id": "F-002", "name": None, "removed": True},
    ]
    assert details["stages"][1]["assignees"] == []
    assert details["tests"][0] == {"id": "T-1", "kind": "ELECTRICAL", "result": None}
    assert details["parts"][0]["status"] == "IN_PRODUCTION"


def test_details_unknown_aircraft():
    """Asking for a missing aircraft raises AircraftNotFoundError."""
    with pytest.raises(AircraftNotFoundError):
        views.aircraft_details(InMemoryRepository(), "AC-404")


def test_views_do_not_persist(populated_aircraft):
    """Reading never writes."""
    repository = InMemoryRepository(aircraft=[populated_aircraft])
    views.list_aircraft(repository)
    views.aircraft_details(repository, "AC-9")
    assert repository.persist_count == 0
