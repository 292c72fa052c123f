"""Logging setup for the Enlist CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr whose level follows ``-v``/``-q``;
- an optional "flight recorder": a `MemoryHandler` that keeps recent records
  at DEBUG and dumps them to a file once a WARNING arrives (or on close when
  forced).

`LoggingSettings` carries the resolved CLI options; `configure_logging`
installs the handlers and `log_startup` reports what was installed.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "enlist"
BASE_LEVEL = logging.WARNING
RECORD_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LoggingSettings:
    """Resolved logging options for one CLI run."""

    level: int = BASE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = False
    flight_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)
    redactor_mode: str = "lenient"

    @staticmethod
    def verbosity_level(verbose: int, quiet: int) -> int:
        """Step one level per ``-v``/``-q`` from WARNING, clamped to DEBUG..CRITICAL."""
        level = BASE_LEVEL - 10 * verbose + 10 * quiet
        return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[lib]`` for records from outside Enlist.

    Enlist's own records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    In debug mode the level is forced to DEBUG and records show their
    timestamp, logger name and source location; otherwise third-party
    records are tagged by `ThirdPartyPrefixFilter`.
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
    """Build a flight recorder writing to `path`.

    Up to `capacity` records are buffered; the buffer is written out when a
    record at `flush_level` or above is handled, when it fills up, and on
    close if `flush_on_close` is set. The file is only created on first write.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(RECORD_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the console handler (and flight recorder) on the root logger.

    The root logger is opened up to DEBUG so the flight recorder sees
    everything; each handler applies its own level. Per-logger levels from
    `settings.logger_levels` are applied last.

    Returns:
        The installed handlers, console handler first.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=settings.level, debug_mode=settings.debug, color=settings.color
        )
    ]
    if settings.flight_recorder and settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=settings.log_path,
                capacity=settings.flight_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _dist_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO summary, then environment details at DEBUG."""
    recorder_on = settings.flight_recorder and settings.log_path is not None
    logger.info(
        "ENLIST %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        "ON" if recorder_on else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Click: %s", _dist_version("click"))
    logger.debug("Rich: %s", _dist_version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if recorder_on:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.flight_capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(level)
            for name, level in settings.logger_levels.items()
        }
        or "<none>",
    )
    logger.debug("Redactor mode: %s", settings.redactor_mode)
