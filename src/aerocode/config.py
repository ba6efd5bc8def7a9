"""Configuration utilities for AEROCODE.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from enum import Enum
from pathlib import Path

DATA_DIR_ENV_VAR = "AEROCODE_DATA_DIR"  # pragma: no mutate
ID_STRATEGY_ENV_VAR = "AEROCODE_ID_STRATEGY"  # pragma: no mutate

DEFAULT_DATA_DIR_NAME = "data"  # pragma: no mutate
AIRCRAFT_FILENAME = "aircraft.json"  # pragma: no mutate
EMPLOYEES_FILENAME = "employees.json"  # pragma: no mutate
REPORT_SUFFIX = "_relatorio.txt"  # pragma: no mutate


class IdStrategy(Enum):
    """Available identifier generation strategies."""

    SHORT = "short"
    ULID = "ulid"
    UUID = "uuid"


class InvalidIdStrategyError(ValueError):
    """Raised when AEROCODE_ID_STRATEGY names an unknown strategy."""

    def __init__(self, value: str) -> None:
        choices = ", ".join(s.value for s in IdStrategy)
        super().__init__(f"Unknown id strategy {value!r} (expected one of: {choices})")
        self.value = value


def get_data_dir() -> Path:
    """Get the data directory holding the JSON documents and reports.

    Returns:
        The value of `AEROCODE_DATA_DIR` if set, otherwise `./data` relative
        to the current working directory.
    """
    if raw := os.environ.get(DATA_DIR_ENV_VAR):
        return Path(raw)
    return Path.cwd() / DEFAULT_DATA_DIR_NAME


def get_id_strategy() -> IdStrategy:
    """Get the id generation strategy from the environment.

    Returns:
        The strategy named by `AEROCODE_ID_STRATEGY`, or `IdStrategy.SHORT`
        when unset.

    Raises:
        InvalidIdStrategyError: If the variable names an unknown strategy.
    """
    raw = os.environ.get(ID_STRATEGY_ENV_VAR)
    if not raw:
        return IdStrategy.SHORT
    return parse_id_strategy(raw)


def parse_id_strategy(raw: str) -> IdStrategy:
    """Parse a strategy name, case-insensitively."""
    try:
        return IdStrategy(raw.strip().lower())
    except ValueError as e:
        raise InvalidIdStrategyError(raw) from e
