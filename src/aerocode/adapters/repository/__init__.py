"""Repository adapters."""

from .json_file import JsonFileRepository
from .mapper import RecordMapper
from .memory import InMemoryRepository

__all__ = ["InMemoryRepository", "JsonFileRepository", "RecordMapper"]
