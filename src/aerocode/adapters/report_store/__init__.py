"""Report store adapters."""

from .local import LocalReportStore
from .memory import MemoryReportStore

__all__ = ["LocalReportStore", "MemoryReportStore"]
