"""CARTSOURCE CLI entry point.

Defines the top-level ``cartsource`` command (via Click-Extra) and registers
subcommands exposed by the project.

Currently available commands
- ``cartsource replay``: rebuild a cart from a recorded event stream.

Examples
    $ cartsource --version
    $ cartsource replay events.json
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from cartsource import __version__, config
from cartsource.logging import configure_logging, log_startup, verbosity_to_level

from .helpers.log_level_parser import parse_log_level
from .replay import replay

logger = logging.getLogger(__name__)


HELP = """CARTSOURCE command-line interface.

    CARTSOURCE keeps shopping carts as streams of events. The cart's contents and
    total are never stored directly; they are rebuilt by replaying the events.
    """


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
    help="More console output: -v shows INFO, -vv shows DEBUG.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Less console output: -q shows only errors, -qq only critical messages.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Show everything at DEBUG, with timestamps, logger names and source lines.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder writes to [default: per-user log dir/latest.log].",
    default=None,
    envvar=config.LOG_PATH_ENV,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="CARTSOURCE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Buffer recent DEBUG records in memory (regardless of -v/-q) and dump them "
        "to --log-path as soon as a warning or error is logged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Also dump the flight recorder buffer when logging shuts down, "
        "even if nothing went wrong."
    ),
    default=False,
    envvar="CARTSOURCE_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Minimum level for one logger, as NAME=LEVEL (e.g. "
        "-L cartsource.domain=INFO). Affects console and flight recorder alike. "
        "Repeat the option, or give a comma/space separated list."
    ),
    envvar="CARTSOURCE_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def cartsource(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """CARTSOURCE command-line interface."""

    setup = configure_logging(
        level=verbosity_to_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=(log_path or config.get_log_path()) if flight_recorder else None,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    log_startup(logger, __version__, setup)


cartsource.add_command(replay)
