"""The ``aerocode`` command group.

The group callback only sets up logging; the record keeping itself lives in
the ``shell`` subcommand.

Examples
    $ aerocode --version
    $ aerocode -v shell --data-dir ./data
    $ aerocode -L aerocode.adapters=DEBUG --force-flush shell
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from aerocode import __version__
from aerocode.logging import LoggingOptions, configure_logging, log_startup

from .helpers import parse_log_level
from .shell import shell as shell_command

logger = logging.getLogger(__name__)


HELP = """AEROCODE command-line interface.

    Tracks aircraft manufacturing: employees, aircraft, parts, production
    stages, tests and delivery reports, stored as JSON documents on local disk.
    """


def default_log_path() -> Path:
    """Flight recorder file under the per-user log directory."""
    return Path(user_log_dir("aerocode", appauthor=False)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    default=0,
    help="Show more on the console; repeat for more (-v INFO, -vv DEBUG).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Show less on the console; repeat for less (-q ERROR, -qq CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Developer output: DEBUG console with logger names and source paths.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="AEROCODE_LOG_PATH",
    show_envvar=True,
    help="Flight recorder file. Defaults to latest.log in the user log directory.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="AEROCODE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_envvar=True,
    help=(
        "Buffer DEBUG records in memory and dump them to --log-path when a "
        "WARNING or worse is logged. Independent of -v/-q."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also dump the flight recorder buffer when the program exits.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL. Repeatable, or a "
        "comma/space separated list in AEROCODE_LOGGER_LEVELS."
    ),
)
@clickx.pass_context
def aerocode(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """AEROCODE command-line interface."""
    options = LoggingOptions(
        verbose=verbose_count,
        quiet=quiet_count,
        debug=debug,
        # ColorOption leaves None when nothing was asked for
        color=ctx.color is not False,
        log_path=(log_path or default_log_path()) if flight_recorder else None,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(options)
    log_startup(logger, options, handlers, app_version=__version__)
    ctx.call_on_close(logging.shutdown)


aerocode.add_command(shell_command)
