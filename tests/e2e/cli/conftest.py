"""Fixtures and test helpers for end-to-end shell tests.

Provides a CliRunner, a per-test data directory, sequential ids so scripted
input can refer to generated ids, and helpers that feed a script of answers
to ``aerocode shell``.

Scripts given to ``run_shell`` must end the session themselves (``exit``):
how an exhausted input stream surfaces differs between Click releases. Use
``run_shell_to_eof`` to exercise end of input.
"""

import importlib
from collections.abc import Callable
from pathlib import Path

import click
import pytest
from click.testing import CliRunner, Result

from aerocode.adapters.id_generators import SimpleIdGenerator
from aerocode.entrypoints.cli.main import aerocode

# pylint: disable=redefined-outer-name

# the package re-exports the bootstrap function under the module name
bootstrap_module = importlib.import_module("aerocode.bootstrap.bootstrap")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Data directory for the shell under test."""
    return tmp_path / "data"


@pytest.fixture
def sequential_ids(monkeypatch):
    """Make the shell hand out ids 001, 002, ... in creation order."""
    monkeypatch.setattr(
        bootstrap_module, "build_id_generator", lambda strategy: SimpleIdGenerator()
    )


@pytest.fixture
def run_shell(runner, data_dir, sequential_ids) -> Callable[..., Result]:
    """Run ``aerocode shell`` answering prompts from the given lines."""

    def _run(*lines: str) -> Result:
        return runner.invoke(
            aerocode,
            ["--no-flight-recorder", "shell", "--data-dir", str(data_dir)],
            input="".join(f"{line}\n" for line in lines),
        )

    return _run


@pytest.fixture
def run_shell_to_eof(run_shell, monkeypatch) -> Callable[..., Result]:
    """Like ``run_shell``, but the prompt after the last line aborts.

    That is what ``click.prompt`` does when a real terminal reaches end of
    input (Ctrl-D).
    """
    real_prompt = click.prompt

    def _run(*lines: str) -> Result:
        remaining = len(lines)

        def prompt(*args, **kwargs):
            nonlocal remaining
            if remaining == 0:
                raise click.Abort()
            remaining -= 1
            return real_prompt(*args, **kwargs)

        monkeypatch.setattr(click, "prompt", prompt)
        return run_shell(*lines)

    return _run
