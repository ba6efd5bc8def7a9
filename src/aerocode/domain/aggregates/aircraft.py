"""Aircraft aggregate.

An aircraft owns its parts, production stages and tests. Stages form an
ordered sequence: insertion order is the dependency order of the stage state
machine (PENDING -> IN_PROGRESS -> DONE).
"""

import logging
from dataclasses import dataclass, field

from aerocode.domain.errors import (
    PrecedingStageIncompleteError,
    StageNotFoundError,
    StageNotInProgressError,
    TestNotFoundError,
)
from aerocode.domain.value_objects import (
    AircraftType,
    PartStatus,
    PartType,
    StageStatus,
    TestKind,
    TestResult,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Part:
    """A part built into an aircraft."""

    id: str
    name: str
    type: PartType
    supplier: str
    status: PartStatus = PartStatus.IN_PRODUCTION


@dataclass(slots=True)
class Test:
    """A test run on an aircraft. ``result`` is None until it is recorded."""

    __test__ = False  # not a pytest test class

    id: str
    kind: TestKind
    result: TestResult | None = None


@dataclass(slots=True)
class Stage:
    """A production stage.

    ``assignees`` holds employee ids in assignment order, without duplicates.
    The ids are not re-validated after assignment, so they may outlive the
    employee they point at.
    """

    id: str
    name: str
    deadline: str
    status: StageStatus = StageStatus.PENDING
    assignees: list[str] = field(default_factory=list)

    def assign(self, employee_id: str) -> None:
        """Add an employee id to the assignees (no-op if already present)."""
        if employee_id not in self.assignees:
            self.assignees.append(employee_id)


@dataclass(slots=True)
class Aircraft:  # pylint: disable=too-many-instance-attributes
    """Aggregate root representing an aircraft under manufacture."""

    code: str
    model: str
    type: AircraftType
    capacity: int
    range: float
    parts: list[Part] = field(default_factory=list)
    stages: list[Stage] = field(default_factory=list)
    tests: list[Test] = field(default_factory=list)
    client: str | None = None
    delivery_date: str | None = None

    # --- Lookups ---

    def find_stage(self, stage_id: str) -> Stage:
        """Return the stage with ``stage_id``.

        Raises:
            StageNotFoundError: If the aircraft has no such stage.
        """
        return self.stages[self._stage_index(stage_id)]

    def find_test(self, test_id: str) -> Test:
        """Return the test with ``test_id``.

        Raises:
            TestNotFoundError: If the aircraft has no such test.
        """
        for test in self.tests:
            if test.id == test_id:
                return test
        raise TestNotFoundError(self.code, test_id)

    def owned_ids(self) -> set[str]:
        """Ids of every part, stage and test owned by this aircraft."""
        return (
            {p.id for p in self.parts}
            | {s.id for s in self.stages}
            | {t.id for t in self.tests}
        )

    # --- Ownership ---

    def add_part(self, part: Part) -> None:
        self.parts.append(part)

    def add_stage(self, stage: Stage) -> None:
        self.stages.append(stage)

    def add_test(self, test: Test) -> None:
        self.tests.append(test)

    # --- Stage state machine ---

    def start_stage(self, stage_id: str) -> Stage:
        """Move a stage to IN_PROGRESS.

        A stage other than the first may only start once the stage right
        before it is DONE. The stage's own status is not checked, so a DONE
        stage can be started again.

        Raises:
            StageNotFoundError: If the aircraft has no such stage.
            PrecedingStageIncompleteError: If the preceding stage is not DONE.
        """
        index = self._stage_index(stage_id)
        stage = self.stages[index]
        if index > 0:
            preceding = self.stages[index - 1]
            if preceding.status is not StageStatus.DONE:
                raise PrecedingStageIncompleteError(stage.id, preceding.id)
        if stage.status is StageStatus.DONE:
            logger.warning(
                "Restarting stage %s of aircraft %s which was already done",
                stage.id,
                self.code,
            )
        stage.status = StageStatus.IN_PROGRESS
        return stage

    def finish_stage(self, stage_id: str) -> Stage:
        """Move an IN_PROGRESS stage to DONE.

        Raises:
            StageNotFoundError: If the aircraft has no such stage.
            StageNotInProgressError: If the stage is not IN_PROGRESS.
        """
        stage = self.find_stage(stage_id)
        if stage.status is not StageStatus.IN_PROGRESS:
            raise StageNotInProgressError(stage.id, stage.status.value)
        stage.status = StageStatus.DONE
        return stage

    # --- Tests ---

    def record_test_result(self, test_id: str, result: TestResult) -> Test:
        """Set the result of a test, overwriting any previous result."""
        test = self.find_test(test_id)
        test.result = result
        return test

    # --- Delivery ---

    def set_delivery(self, client: str, delivery_date: str) -> None:
        self.client = client
        self.delivery_date = delivery_date

    # --- Internal Helpers ---

    def _stage_index(self, stage_id: str) -> int:
        for index, stage in enumerate(self.stages):
            if stage.id == stage_id:
                return index
        raise StageNotFoundError(self.code, stage_id)
