"""Module defining Commands."""

from dataclasses import dataclass, field

from aerocode.domain.value_objects import (
    AircraftType,
    PartType,
    PermissionLevel,
    TestKind,
    TestResult,
)

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# --- Session ---


@dataclass(frozen=True)
class Login(Command):
    """Command to authenticate an employee for the current session."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class Logout(Command):
    """Command to clear the current session."""


# --- Employees ---


@dataclass(frozen=True)
class CreateEmployee(Command):
    """Command to register a new employee."""

    name: str
    phone: str
    address: str
    username: str
    password: str = field(repr=False)
    level: PermissionLevel = PermissionLevel.OPERATOR


@dataclass(frozen=True)
class DeleteEmployee(Command):
    """Command to remove an employee."""

    employee_id: str


# --- Aircraft ---


@dataclass(frozen=True)
class CreateAircraft(Command):
    """Command to register a new aircraft under a unique code."""

    code: str
    model: str
    type: AircraftType
    capacity: int
    range: float


@dataclass(frozen=True)
class DeleteAircraft(Command):
    """Command to remove an aircraft together with everything it owns."""

    code: str


@dataclass(frozen=True)
class AddPart(Command):
    """Command to add a part to an aircraft."""

    code: str
    name: str
    type: PartType
    supplier: str


@dataclass(frozen=True)
class AddStage(Command):
    """Command to append a production stage to an aircraft."""

    code: str
    name: str
    deadline: str


@dataclass(frozen=True)
class AddTest(Command):
    """Command to add a test to an aircraft."""

    __test__ = False  # not a pytest test class

    code: str
    kind: TestKind


# --- Stages ---


@dataclass(frozen=True)
class StartStage(Command):
    """Command to move a stage to IN_PROGRESS."""

    code: str
    stage_id: str


@dataclass(frozen=True)
class FinishStage(Command):
    """Command to move a stage to DONE."""

    code: str
    stage_id: str


@dataclass(frozen=True)
class AssignEmployee(Command):
    """Command to assign an employee to a stage."""

    code: str
    stage_id: str
    employee_id: str


# --- Tests ---


@dataclass(frozen=True)
class SetTestResult(Command):
    """Command to record the result of a test."""

    __test__ = False  # not a pytest test class

    code: str
    test_id: str
    result: TestResult


# --- Reports ---


@dataclass(frozen=True)
class GenerateReport(Command):
    """Command to record delivery details and write the aircraft report."""

    code: str
    client: str
    delivery_date: str
