"""Logging setup for the handykit command-line interface.

Library modules only create ``logging.getLogger(__name__)`` loggers and emit
DEBUG records; they never install handlers. The CLI wires up two handlers
through :func:`configure_logging`:

- a Rich console handler on stderr whose level follows ``-v``/``-q``;
- an in-memory "flight recorder" that keeps the last N records at DEBUG
  granularity and dumps them to a file when a WARNING or worse is logged.

Records from other libraries get a short ``[libname]`` prefix on the console.
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

PROJECT_PREFIX = "handykit"
REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich", "pydantic")

BASE_CONSOLE_LEVEL = logging.WARNING
DEFAULT_RECORDER_CAPACITY = 2000
LEVEL_STEP = logging.INFO - logging.DEBUG

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def is_project_logger(name: str) -> bool:
    """Return True for ``handykit`` and its child loggers."""
    return name == PROJECT_PREFIX or name.startswith(f"{PROJECT_PREFIX}.")


class LibraryPrefixFilter(logging.Filter):
    """Tag records from other libraries with their top-level package.

    A record from ``asyncio.events`` gets ``record.prefix == "[asyncio]"``;
    handykit's own records get ``""``. No record is dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if is_project_logger(record.name):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def console_level(verbose: int = 0, quiet: int = 0) -> int:
    """Return the console level for ``verbose`` ``-v`` and ``quiet`` ``-q`` flags.

    Each flag moves one step away from WARNING; the result stays within
    DEBUG..CRITICAL however many flags are given.
    """
    level = BASE_CONSOLE_LEVEL + LEVEL_STEP * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (DEBUG in ``debug_mode``).
        debug_mode: Show timestamps, logger names and source locations.
        color: Enable color output.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
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
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(LibraryPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_RECORDER_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    The file is opened lazily, so a run that never flushes leaves no file
    behind.

    Args:
        path: Destination file for flushed records.
        capacity: Number of records to buffer.
        flush_level: Level at or above which the buffer is flushed.
        flush_on_close: Flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


@dataclass(frozen=True)
class LoggingSettings:
    """Logging choices made on the command line.

    Attributes:
        level: Console threshold, usually from :func:`console_level`.
        debug: Verbose console format at DEBUG.
        color: Allow colored console output.
        log_path: Flight-recorder file; no recorder is installed without one.
        flight_recorder: Install the flight recorder.
        capacity: Records kept by the flight recorder.
        flush_on_close: Dump the flight recorder on exit even after a clean run.
        logger_levels: Minimum level per logger name.
    """

    level: int = BASE_CONSOLE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = True
    capacity: int = DEFAULT_RECORDER_CAPACITY
    flush_on_close: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def records_to_file(self) -> bool:
        """Whether a flight recorder will be installed."""
        return self.flight_recorder and self.log_path is not None


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Replace the root logger's handlers according to ``settings``.

    The root logger itself passes every record; each handler applies its own
    threshold. Per-logger levels are applied last.

    Returns:
        list[logging.Handler]: The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(settings.level, settings.debug, settings.color)
    ]
    if settings.records_to_file:
        handlers.append(
            config_flight_recorder(
                settings.log_path,  # type: ignore[arg-type]
                capacity=settings.capacity,
                flush_on_close=settings.flush_on_close,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
    *,
    app_version: str,
) -> None:
    """Log a one-line startup summary at INFO and diagnostics at DEBUG."""
    logger.info(
        "handykit %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        "ON" if settings.records_to_file else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for dist in REPORTED_DISTRIBUTIONS:
        logger.debug("%s: %s", dist, _distribution_version(dist))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.records_to_file:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.capacity,
            settings.flush_on_close,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>",
    )
