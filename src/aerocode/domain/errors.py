"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} ({key}) not found.")
        self.kind = kind
        self.key = key


class InvalidTransitionError(DomainError):
    """Raised when a record is in an invalid state for the attempted action."""


# ============================================================================
#                           Lookup errors
# ============================================================================


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee id does not match any employee."""

    def __init__(self, employee_id: str) -> None:
        super().__init__("Employee", employee_id)
        self.employee_id = employee_id


class AircraftNotFoundError(NotFoundError):
    """Raised when an aircraft code does not match any aircraft."""

    def __init__(self, code: str) -> None:
        super().__init__("Aircraft", code)
        self.code = code


class StageNotFoundError(NotFoundError):
    """Raised when a stage id does not belong to the aircraft."""

    def __init__(self, code: str, stage_id: str) -> None:
        super().__init__("Stage", stage_id)
        self.code = code
        self.stage_id = stage_id


class TestNotFoundError(NotFoundError):
    """Raised when a test id does not belong to the aircraft."""

    __test__ = False  # not a pytest test class

    def __init__(self, code: str, test_id: str) -> None:
        super().__init__("Test", test_id)
        self.code = code
        self.test_id = test_id


# ============================================================================
#                           Aircraft related errors
# ============================================================================


class DuplicateCodeError(DomainError):
    """Raised when creating an aircraft whose code is already taken."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Aircraft code '{code}' already exists.")
        self.code = code


# ============================================================================
#                           Stage related errors
# ============================================================================


class PrecedingStageIncompleteError(InvalidTransitionError):
    """Raised when starting a stage whose predecessor is not done."""

    def __init__(self, stage_id: str, preceding_stage_id: str) -> None:
        super().__init__(
            f"Stage {stage_id} cannot start: preceding stage "
            f"{preceding_stage_id} is not done."
        )
        self.stage_id = stage_id
        self.preceding_stage_id = preceding_stage_id


class StageNotInProgressError(InvalidTransitionError):
    """Raised when finishing a stage that is not in progress."""

    def __init__(self, stage_id: str, status: str) -> None:
        super().__init__(f"Stage {stage_id} is not in progress (status: {status}).")
        self.stage_id = stage_id
        self.status = status
