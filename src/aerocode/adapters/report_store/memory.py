"""In-memory report store for testing purposes."""

from aerocode.interfaces.report_store import ReportStore


class MemoryReportStore(ReportStore):
    """ReportStore keeping reports in a dict keyed by report name."""

    def __init__(self) -> None:
        self.reports: dict[str, str] = {}

    def write(self, code: str, text: str) -> str:
        name = self.report_name(code)
        self.reports[name] = text
        return name

    def read(self, code: str) -> str:
        name = self.report_name(code)
        try:
            return self.reports[name]
        except KeyError:
            raise FileNotFoundError(f"No report for aircraft {code!r}") from None
