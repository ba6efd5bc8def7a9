"""JSON file-backed repository adapter.

State lives in two pretty-printed UTF-8 JSON documents inside the data
directory: one array of aircraft and one array of employees. Every persist
rewrites both documents in full (last write wins).
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from aerocode.config import AIRCRAFT_FILENAME, EMPLOYEES_FILENAME
from aerocode.domain.aggregates import Aircraft, Employee
from aerocode.interfaces import PathLike
from aerocode.interfaces.repository import Repository

from .mapper import RecordMapper

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonFileRepository(Repository):
    """Repository persisted as two JSON documents in a local directory."""

    def __init__(self, root: PathLike, mapper: RecordMapper | None = None) -> None:
        super().__init__()
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)
        self._mapper = mapper or RecordMapper()

    @property
    def aircraft_path(self) -> Path:
        return self._root / AIRCRAFT_FILENAME

    @property
    def employees_path(self) -> Path:
        return self._root / EMPLOYEES_FILENAME

    # --- Repository hooks ---

    def _read(self) -> tuple[list[Aircraft], list[Employee]]:
        aircraft = self._read_document(
            self.aircraft_path, self._mapper.aircraft_from_dict
        )
        employees = self._read_document(
            self.employees_path, self._mapper.employee_from_dict
        )
        logger.debug(
            "Loaded %d aircraft and %d employees from %s",
            len(aircraft),
            len(employees),
            self._root,
        )
        return aircraft, employees

    def _write(self, aircraft: list[Aircraft], employees: list[Employee]) -> None:
        self._write_document(
            self.aircraft_path, [self._mapper.aircraft_to_dict(a) for a in aircraft]
        )
        self._write_document(
            self.employees_path, [self._mapper.employee_to_dict(e) for e in employees]
        )
        logger.debug(
            "Persisted %d aircraft and %d employees to %s",
            len(aircraft),
            len(employees),
            self._root,
        )

    # --- Internal Helpers ---

    @staticmethod
    def _read_document(path: Path, convert: Callable[[dict[str, Any]], T]) -> list[T]:
        """Read a JSON array document, treating absent or malformed files as empty."""
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            return [convert(item) for item in data]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring malformed document %s: %s", path, e)
            return []

    def _write_document(self, path: Path, payload: list[dict[str, Any]]) -> None:
        """Write a JSON document via a temporary file and an atomic replace."""
        tmp = tempfile.NamedTemporaryFile(  # pylint: disable=consider-using-with
            "w", encoding="utf-8", dir=self._root, delete=False, suffix=".tmp"
        )
        tmp_path = Path(tmp.name)
        try:
            with tmp:
                json.dump(payload, tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
