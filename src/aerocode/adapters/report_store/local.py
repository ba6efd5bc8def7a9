"""Local filesystem report store adapter."""

import os
import tempfile
from pathlib import Path

from aerocode.interfaces import PathLike
from aerocode.interfaces.report_store import ReportStore


class LocalReportStore(ReportStore):
    """ReportStore that writes ``<code>_relatorio.txt`` files into a directory."""

    def __init__(self, root: PathLike) -> None:
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)

    def write(self, code: str, text: str) -> str:
        dest = self._root / self.report_name(code)

        tmp = tempfile.NamedTemporaryFile(  # pylint: disable=consider-using-with
            "w", encoding="utf-8", dir=self._root, delete=False, suffix=".tmp"
        )
        tmp_path = Path(tmp.name)
        try:
            with tmp:
                tmp.write(text)
            # Replace any previous report for this code in one step
            os.replace(tmp_path, dest)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        return str(dest)

    def read(self, code: str) -> str:
        path = self._root / self.report_name(code)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise FileNotFoundError(f"No report for aircraft {code!r}") from None
