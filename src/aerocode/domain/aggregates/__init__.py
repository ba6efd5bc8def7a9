"""Aggregates owned by the repository: aircraft (with their parts, stages and
tests) and employees."""

from .aircraft import Aircraft, Part, Stage, Test
from .employee import Employee

__all__ = ["Aircraft", "Employee", "Part", "Stage", "Test"]
