"""Integration tests for the JSON file repository."""

import json
import logging

import pytest

from aerocode.adapters.repository import JsonFileRepository
from aerocode.domain.value_objects import PermissionLevel, StageStatus, TestResult

# pylint: disable=magic-value-comparison


@pytest.fixture(name="repo")
def _repo(tmp_path) -> JsonFileRepository:
    repository = JsonFileRepository(tmp_path / "data")
    repository.load()
    return repository


def test_creates_data_dir(tmp_path):
    """The data directory is created on construction."""
    JsonFileRepository(tmp_path / "nested" / "data")
    assert (tmp_path / "nested" / "data").is_dir()


def test_missing_files_load_empty(repo):
    """A fresh directory holds no aircraft and no employees."""
    assert repo.list_aircraft() == []
    assert repo.list_employees() == []


def test_round_trip(tmp_path, repo, populated_aircraft, make_employee):
    """Everything persisted comes back equal after a reload."""
    populated_aircraft.stages[1].status = StageStatus.IN_PROGRESS
    populated_aircraft.tests[0].result = TestResult.PASSED
    populated_aircraft.set_delivery("LATAM", "2025-06-30")
    employee = make_employee(name="José", level=PermissionLevel.ENGINEER)
    repo.add_aircraft(populated_aircraft)
    repo.add_employee(employee)
    repo.persist()

    reloaded = JsonFileRepository(tmp_path / "data")
    reloaded.load()
    assert reloaded.get_aircraft("AC-9") == populated_aircraft
    assert reloaded.get_employee(employee.id) == employee


def test_documents_are_pretty_printed_utf8(repo, make_employee):
    """Documents are indented JSON arrays without ASCII escaping."""
    repo.add_employee(make_employee(name="João"))
    repo.persist()

    text = repo.employees_path.read_text(encoding="utf-8")
    assert "João" in text
    assert text.startswith("[\n  {")
    assert json.loads(repo.aircraft_path.read_text(encoding="utf-8")) == []


def test_document_shape(repo, populated_aircraft):
    """Aircraft are stored with enum values and nested children."""
    repo.add_aircraft(populated_aircraft)
    repo.persist()

    [doc] = json.loads(repo.aircraft_path.read_text(encoding="utf-8"))
    assert doc["code"] == "AC-9"
    assert doc["type"] == "COMMERCIAL"
    assert doc["stages"][0] == {
        "id": "E-1",
        "name": "Fuselage",
        "deadline": "2025-03-01",
        "status": "DONE",
        "assignees": ["F-001", "F-002"],
    }
    assert doc["tests"][1] == {"id": "T-2", "kind": "HYDRAULIC", "result": None}
    assert doc["client"] is None


def test_persist_overwrites_previous_state(tmp_path, repo, make_aircraft):
    """A persist replaces the documents in full."""
    repo.add_aircraft(make_aircraft("AC-1"))
    repo.persist()
    repo.remove_aircraft("AC-1")
    repo.persist()

    reloaded = JsonFileRepository(tmp_path / "data")
    reloaded.load()
    assert reloaded.list_aircraft() == []


def test_no_temp_files_left(repo, make_aircraft):
    """Atomic writes leave only the two documents behind."""
    repo.add_aircraft(make_aircraft("AC-1"))
    repo.persist()
    assert sorted(p.name for p in repo.aircraft_path.parent.iterdir()) == [
        "aircraft.json",
        "employees.json",
    ]


def test_failed_write_leaves_no_temp_file(repo, make_aircraft):
    """A document that cannot be replaced raises without leaving a temp file."""
    repo.aircraft_path.mkdir()
    repo.add_aircraft(make_aircraft("AC-1"))
    with pytest.raises(OSError):
        repo.persist()
    assert not list(repo.aircraft_path.parent.glob("*.tmp"))


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"code": "AC-1"}',
        '[{"code": "AC-1"}]',
        (
            '[{"code": "AC-1", "model": "x", "type": "SPACESHIP",'
            ' "capacity": 1, "range": 1}]'
        ),
    ],
)
def test_malformed_document_loads_empty(tmp_path, content, caplog):
    """A malformed aircraft document is treated as empty, with a warning."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "aircraft.json").write_text(content, encoding="utf-8")
    repository = JsonFileRepository(data_dir)

    with caplog.at_level(logging.WARNING):
        repository.load()

    assert repository.list_aircraft() == []
    assert "Ignoring malformed document" in caplog.text


def test_stored_enums_are_read_by_value_only(tmp_path, caplog):
    """Prompt aliases such as COMERCIAL are not accepted in stored documents."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "aircraft.json").write_text(
        '[{"code": "AC-1", "model": "x", "type": "COMERCIAL", "capacity": 1,'
        ' "range": 1, "parts": [], "stages": [], "tests": []}]',
        encoding="utf-8",
    )
    repository = JsonFileRepository(data_dir)

    with caplog.at_level(logging.WARNING):
        repository.load()

    assert repository.list_aircraft() == []
    assert "COMERCIAL" in caplog.text


def test_malformed_aircraft_does_not_affect_employees(tmp_path, make_employee):
    """Each document is read independently."""
    data_dir = tmp_path / "data"
    seed = JsonFileRepository(data_dir)
    seed.add_employee(make_employee(username="bob"))
    seed.persist()
    seed.aircraft_path.write_text("garbage", encoding="utf-8")

    repository = JsonFileRepository(data_dir)
    repository.load()
    assert [e.username for e in repository.list_employees()] == ["bob"]


def test_discard_changes_restores_loaded_state(repo, make_aircraft):
    """discard_changes goes back to the last load or persist."""
    repo.add_aircraft(make_aircraft("AC-1"))
    repo.persist()
    repo.get_aircraft("AC-1").model = "changed"
    repo.add_aircraft(make_aircraft("AC-2"))

    repo.discard_changes()

    assert repo.get_aircraft("AC-1").model == "A320"
    assert repo.get_aircraft("AC-2") is None
