"""Logging setup for the CARTSOURCE CLI.

Console output goes through Rich on stderr so that stdout stays free for
command output (e.g. ``cartsource replay --json``). Alongside it an optional
"flight recorder" buffers every record at DEBUG and only writes the buffer to
disk when something goes wrong.

The domain and service layers never configure logging; they only use
module-level loggers. Everything here is wired once by the CLI group.
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

PROJECT_PREFIX = "cartsource"
BASE_LEVEL = logging.WARNING
DEFAULT_FLIGHT_CAPACITY = 2000

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from foreign loggers with ``[top-level-name]``.

    Sets ``record.prefix`` (used by the console format) and never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def verbosity_to_level(verbose: int = 0, quiet: int = 0) -> int:
    """Map ``-v``/``-q`` counts to a level, one step of 10 per repetition.

    Starts from WARNING and is clamped to the DEBUG..CRITICAL range.
    """
    level = BASE_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler.

    Args:
        level: Minimum level shown on the console (DEBUG when `debug_mode`).
        debug_mode: Show timestamps, logger names and source locations.
        color: Allow colored output; mirrors click-extra's ``--color/--no-color``.

    Returns:
        A RichHandler writing to stderr.
    """
    color_system: ColorSystem | None = "auto" if color else None
    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
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
    capacity: int = DEFAULT_FLIGHT_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a MemoryHandler in front of a file.

    The file is opened (and truncated) lazily, on the first flush, so a run
    that never reaches `flush_level` leaves no file behind unless
    `flush_on_close` is set.

    Args:
        path: File that receives flushed records.
        capacity: Number of buffered records before a forced flush.
        flush_level: Records at or above this level flush the buffer.
        flush_on_close: Also flush when the handler is closed.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] "
            "%(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


@dataclass
class LoggingSetup:
    """What `configure_logging` installed, as reported by `log_startup`."""

    level: int
    handlers: list[logging.Handler]
    log_path: Path | None = None
    flight_capacity: int | None = None
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        """True when a flight recorder handler is installed."""
        return self.flight_capacity is not None


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    flight_capacity: int = DEFAULT_FLIGHT_CAPACITY,
    force_flush: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> LoggingSetup:
    """Install the console handler and, when `log_path` is given, the flight recorder.

    The root logger is set to DEBUG so the flight recorder sees everything;
    the console handler filters on its own level. Per-logger overrides set the
    named loggers' levels and therefore apply to both outputs.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                log_path, capacity=flight_capacity, flush_on_close=force_flush
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    overrides = dict(logger_levels or {})
    for name, logger_level in overrides.items():
        logging.getLogger(name).setLevel(logger_level)

    return LoggingSetup(
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_capacity=flight_capacity if log_path is not None else None,
        force_flush=force_flush,
        logger_levels=overrides,
    )


def log_startup(logger: logging.Logger, app_version: str, setup: LoggingSetup) -> None:
    """Log a one-line INFO summary followed by DEBUG diagnostics."""
    logger.info(
        "CARTSOURCE %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(setup.level),
        "ON" if setup.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s, CWD: %s", os.getpid(), Path.cwd())
    for dist in ("click", "click-extra", "rich", "ulid-py"):
        logger.debug("%s: %s", dist, _dist_version(dist))
    logger.debug("Handlers: %s", [type(h).__name__ for h in setup.handlers])
    if setup.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, force-flush=%s",
            setup.log_path,
            setup.flight_capacity,
            setup.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in setup.logger_levels.items()}
        or "<none>",
    )


def _dist_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<unknown>"
