"""handykit CLI entry point.

Defines the top-level ``handykit`` command (via Click-Extra) and registers the
text-utility subcommands.

Available commands
- ``handykit slug`` / ``handykit check-slug``: build and validate URL slugs.
- ``handykit name`` / ``handykit check-name``: normalize and validate names.
- ``handykit hashed-filename``: content-addressed, slug-safe file names.

Examples
    $ handykit --version
    $ handykit slug "Hello World!"
    $ handykit hashed-filename ./report.pdf
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from handykit import __version__
from handykit.config import default_log_path
from handykit.logging import (
    DEFAULT_RECORDER_CAPACITY,
    LoggingSettings,
    configure_logging,
    console_level,
    log_startup,
)

from .commands import check_name, check_slug, hashed_filename, name, slug
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """handykit command-line interface.

    Small text utilities: turn arbitrary text into URL slugs, normalize display
    names, and derive content-hashed file names. Results are written to stdout,
    diagnostics to stderr.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink("https://pypi.org/project/handykit/"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=default_log_path,
    envvar="HANDYKIT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_RECORDER_CAPACITY,
    hidden=True,
    envvar="HANDYKIT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via HANDYKIT_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a WARNING/ERROR "
        "occurs, or on clean exit if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR; console output is unaffected."
    ),
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="HANDYKIT_LOGGER_LEVELS",
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L handykit.sleep=DEBUG) "
        "or via HANDYKIT_LOGGER_LEVELS (comma/space list)."
    ),
    show_envvar=True,
)
@clickx.pass_context
def handykit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """handykit command-line interface."""
    settings = LoggingSettings(
        level=console_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        capacity=flight_recorder_capacity,
        flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers, app_version=__version__)

    # flushes the flight recorder after the subcommand has run
    ctx.call_on_close(logging.shutdown)


handykit.add_command(slug)
handykit.add_command(check_slug)
handykit.add_command(name)
handykit.add_command(check_name)
handykit.add_command(hashed_filename)
