"""Report store interface definitions."""

import abc

from aerocode.config import REPORT_SUFFIX


class ReportStore(abc.ABC):
    """Abstract base class for storing rendered aircraft reports."""

    @abc.abstractmethod
    def write(self, code: str, text: str) -> str:
        """Store the report for aircraft ``code``, replacing any previous one.

        Args:
            code: Aircraft code the report belongs to.
            text: The rendered report.

        Returns:
            str: Where the report was written (a path for file-backed stores).

        Raises:
            ValueError: If the code cannot be used as a report name.
        """

    @abc.abstractmethod
    def read(self, code: str) -> str:
        """Return the stored report for aircraft ``code``.

        Raises:
            FileNotFoundError: If no report was written for the code.
            ValueError: If the code cannot be used as a report name.
        """

    @staticmethod
    def report_name(code: str) -> str:
        """Return the report name for ``code``.

        Raises:
            ValueError: If the code is empty or contains path separators.
        """
        if not code or "/" in code or "\\" in code or code in {".", ".."}:
            raise ValueError(f"Invalid report name for aircraft code {code!r}")
        return f"{code}{REPORT_SUFFIX}"
