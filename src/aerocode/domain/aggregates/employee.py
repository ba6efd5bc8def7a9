"""Employee aggregate."""

from dataclasses import dataclass, field

from aerocode.domain.value_objects import PermissionLevel


@dataclass(slots=True)
class Employee:
    """An employee who can log in and be assigned to production stages.

    Note:
        The password is stored and compared in plaintext. It is excluded from
        ``repr`` so it never ends up in log lines.
    """

    id: str
    name: str
    phone: str
    address: str
    username: str
    password: str = field(repr=False)
    level: PermissionLevel = PermissionLevel.OPERATOR

    def has_credentials(self, username: str, password: str) -> bool:
        """Return True if both username and password match exactly."""
        return self.username == username and self.password == password
