"""Logging setup for the AEROCODE CLI.

Two destinations are configured from the top-level CLI options:

- the console, through Rich, at the verbosity chosen with ``-v``/``-q``;
- an optional "flight recorder": a bounded in-memory buffer of DEBUG records
  that is written to a log file only when something goes wrong (WARNING or
  above), or on exit when a flush is forced.

Everything here is process-wide and is meant to be called once, from the CLI
group callback.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "aerocode"
DEFAULT_CONSOLE_LEVEL = logging.WARNING
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with ``[library]``.

    Sets ``record.prefix`` to the top-level package name in brackets for any
    logger outside ``aerocode`` and to an empty string otherwise, so the
    console format can show where a foreign message came from. Never drops a
    record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.split(".")[0]
        record.prefix = "" if top_level == PROJECT_PREFIX else f"[{top_level}]"
        return True


@dataclass(frozen=True)
class LoggingOptions:  # pylint: disable=too-many-instance-attributes
    """Logging choices collected from the command line."""

    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = True
    flight_capacity: int = 2000
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """WARNING, moved one level down per ``-v`` and up per ``-q``."""
        level = DEFAULT_CONSOLE_LEVEL - 10 * self.verbose + 10 * self.quiet
        return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    In debug mode the handler shows everything down to DEBUG with timestamps,
    logger names and source links. Otherwise it shows messages only, with a
    bracketed prefix for third-party loggers.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder writing to ``path``.

    The target file is only opened on the first flush, so a clean run with
    nothing to report leaves no log file behind.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(options: LoggingOptions) -> list[logging.Handler]:
    """Install the console handler and, if enabled, the flight recorder.

    The root logger is opened up to DEBUG and each handler filters on its own
    level. Per-logger overrides from ``-L`` are applied last.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=options.console_level,
            debug_mode=options.debug,
            color=options.color,
        )
    ]
    if options.flight_recorder and options.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=options.log_path,
                capacity=options.flight_capacity,
                flush_on_close=options.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in options.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    options: LoggingOptions,
    handlers: list[logging.Handler],
    *,
    app_version: str,
) -> None:
    """Log a one-line INFO summary followed by DEBUG diagnostics."""
    recorder_on = options.flight_recorder and options.log_path is not None
    logger.info(
        "AEROCODE %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(options.console_level),
        "ON" if recorder_on else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if recorder_on:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            options.log_path,
            options.flight_capacity,
            options.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in options.logger_levels.items()}
        or "<none>",
    )
