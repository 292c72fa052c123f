"""Top-level ``enlist`` command.

The group owns process-wide concerns (console verbosity, the flight-recorder
log file, per-logger levels and the redaction mode) and hands the redaction
mode to subcommands through ``ctx.meta``. Subcommands are attached at the
bottom of this module.

Examples
    $ enlist --version
    $ enlist -v register "John Doe" test@test.com
    $ ENLIST_LOGGER_LEVELS="enlist.events=ERROR" enlist register Ada ada@example.com
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from enlist import __version__
from enlist.logging import LoggingSettings, configure_logging, log_startup

from .helpers.log_level_parser import parse_log_level
from .register import REDACTOR_MODE_META
from .register import register as register_command

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("enlist", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """Register users and subscribe them to the newsletter.

    Every registration ends in one of two responses, success or
    "failed to register user", whichever collaborator failed. Details of a
    failure are only visible in the logs (see -v and --log-path).
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
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Show more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Show less on the console: -q for ERROR, -qq for CRITICAL.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Console at DEBUG with timestamps, logger names and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="ENLIST_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="ENLIST_FLIGHT_RECORDER_CAPACITY",
    help="Number of records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="ENLIST_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Buffer recent records at DEBUG, whatever -v/-q say, and write them to "
        "--log-path as soon as a WARNING or ERROR is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar="ENLIST_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Also write the flight-recorder buffer on a clean exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("asyncio=WARNING",),
    envvar="ENLIST_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "NAME=LEVEL minimum level for one logger, applied to the console and the "
        "flight recorder alike. Repeatable, e.g. -L enlist.events=ERROR."
    ),
)
@click.option(
    "--redactor-mode",
    type=click.Choice(["lenient", "strict"], case_sensitive=False),
    default="lenient",
    envvar="ENLIST_REDACTOR_MODE",
    show_default=True,
    show_envvar=True,
    help="'strict' also masks names and emails in logged event context.",
)
@clickx.pass_context
def enlist(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
    redactor_mode: str,
) -> None:
    """Register users and subscribe them to the newsletter."""
    settings = LoggingSettings(
        level=LoggingSettings.verbosity_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
        redactor_mode=redactor_mode.lower(),
    )
    handlers = configure_logging(settings)
    ctx.meta[REDACTOR_MODE_META] = settings.redactor_mode

    log_startup(logger, settings, handlers, __version__)
    ctx.call_on_close(logging.shutdown)


enlist.add_command(register_command)
