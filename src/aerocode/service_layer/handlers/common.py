"""Helpers shared by the handlers."""

from collections.abc import Container

from aerocode.domain.aggregates import Aircraft
from aerocode.domain.errors import AircraftNotFoundError
from aerocode.interfaces.id_generator import IdGenerator
from aerocode.interfaces.repository import Repository

MAX_ID_ATTEMPTS = 100  # pragma: no mutate


class IdSpaceExhaustedError(RuntimeError):
    """Raised when no unused id could be generated."""


def new_unique_id(generator: IdGenerator, prefix: str, taken: Container[str]) -> str:
    """Generate ``prefix + id`` that is not in ``taken``.

    Raises:
        IdSpaceExhaustedError: If every attempt collided.
    """
    for _ in range(MAX_ID_ATTEMPTS):
        candidate = f"{prefix}{generator.new_id()}"
        if candidate not in taken:
            return candidate
    raise IdSpaceExhaustedError(
        f"Could not generate an unused '{prefix}' id after {MAX_ID_ATTEMPTS} attempts"
    )


def get_aircraft_or_raise(repository: Repository, code: str) -> Aircraft:
    """Return the aircraft with ``code``.

    Raises:
        AircraftNotFoundError: If no aircraft has this code.
    """
    if (aircraft := repository.get_aircraft(code)) is None:
        raise AircraftNotFoundError(code)
    return aircraft
