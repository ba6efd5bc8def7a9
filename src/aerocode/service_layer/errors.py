"""Service-layer error definitions."""


class AccessError(Exception):
    """Base class for access control errors."""


class AuthRequiredError(AccessError):
    """Raised when an operation needs a logged-in employee and there is none."""

    def __init__(self) -> None:
        super().__init__("Authentication required.")


class PermissionDeniedError(AccessError):
    """Raised when the logged-in employee's level is not allowed."""

    def __init__(self, level: str, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"Permission denied for level {level} (requires one of: {', '.join(allowed)})."
        )
        self.level = level
        self.allowed = allowed
