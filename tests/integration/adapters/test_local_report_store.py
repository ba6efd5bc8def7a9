"""Integration tests for the local filesystem report store."""

import pytest

from aerocode.adapters.report_store import LocalReportStore

# pylint: disable=magic-value-comparison


def test_write_creates_named_file(tmp_path):
    """Reports are written as <code>_relatorio.txt in the store directory."""
    store = LocalReportStore(tmp_path / "reports")
    location = store.write("AC-1", "Aircraft Report - AC-1")
    expected = tmp_path / "reports" / "AC-1_relatorio.txt"
    assert location == str(expected)
    assert expected.read_text(encoding="utf-8") == "Aircraft Report - AC-1"


def test_rewrite_overwrites(tmp_path):
    """A second write replaces the first, leaving a single file."""
    store = LocalReportStore(tmp_path)
    store.write("AC-1", "first")
    store.write("AC-1", "second")
    assert store.read("AC-1") == "second"
    assert [p.name for p in tmp_path.iterdir()] == ["AC-1_relatorio.txt"]


def test_read_missing(tmp_path):
    """Reading a report that was never written raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="AC-404"):
        LocalReportStore(tmp_path).read("AC-404")


@pytest.mark.parametrize("code", ["../escape", "..", "a\\b", ""])
def test_rejects_path_like_codes(tmp_path, code):
    """Codes that would leave the directory are refused before touching disk."""
    store = LocalReportStore(tmp_path / "reports")
    with pytest.raises(ValueError):
        store.write(code, "text")
    assert list((tmp_path / "reports").iterdir()) == []


def test_failed_replace_leaves_no_temp_file(tmp_path):
    """A destination that cannot be replaced raises and cleans up after itself."""
    (tmp_path / "AC-1_relatorio.txt").mkdir()
    store = LocalReportStore(tmp_path)
    with pytest.raises(OSError):
        store.write("AC-1", "Aircraft Report - AC-1")
    assert [p.name for p in tmp_path.iterdir()] == ["AC-1_relatorio.txt"]
