"""Logging setup for the ``pkgcfg`` command.

Two sinks are attached to the root logger:

- a Rich console handler on stderr, so stdout stays reserved for command
  results that may be piped;
- an optional flight recorder: a `MemoryHandler` that keeps recent records at
  DEBUG granularity and writes them to a file once something goes wrong
  (a WARNING or worse), or when the command exits if forced.

Records from the HTTP stack used by ``pkgcfg fetch`` are tagged ``[http]`` on
the console so they stand apart from pkgcfg's own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
from rich.console import Console
from rich.logging import RichHandler

from pkgcfg import config

if TYPE_CHECKING:
    from collections.abc import Callable
    from logging import Logger

# pylint: disable=too-few-public-methods

HTTP_LOGGERS = ("httpx", "httpcore")
FLIGHT_RECORDER_CAPACITY = 2000


@dataclass(frozen=True)
class LogSettings:
    """Logging choices made on the command line.

    Attributes:
        level: Minimum console level.
        debug: Show logger names, source paths and line numbers on the console.
        color: Allow ANSI colors on the console.
        log_path: Destination of the flight recorder, or None to disable it.
        force_flush: Write the flight recorder on exit even without a WARNING.
        logger_levels: Minimum levels for individual loggers.
    """

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def verbosity_level(verbose: int, quiet: int) -> int:
    """Map ``-v``/``-q`` counts onto a logging level around WARNING."""
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class HttpTagFilter(logging.Filter):
    """Set ``record.tag`` to ``[http]`` for HTTP stack records, else ``""``."""

    def filter(self, record: logging.LogRecord) -> bool:
        root = record.name.partition(".")[0]
        record.tag = "[http] " if root in HTTP_LOGGERS else ""
        return True


def console_handler(settings: LogSettings) -> RichHandler:
    """Build the stderr console handler for ``settings``."""
    console = Console(color_system="auto" if settings.color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if settings.debug else settings.level,
        console=console,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
        rich_tracebacks=True,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler.addFilter(HttpTagFilter())
        handler.setFormatter(logging.Formatter("%(tag)s%(message)s"))
    return handler


def flight_recorder(
    path: Path, force_flush: bool = False, capacity: int = FLIGHT_RECORDER_CAPACITY
) -> MemoryHandler:
    """Build a flight recorder writing to ``path``.

    The file is truncated when the recorder is created, so it only ever holds
    the records of the latest run.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s")
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=force_flush,
    )


def configure_logging(settings: LogSettings) -> list[logging.Handler]:
    """Replace the root logger's handlers according to ``settings``.

    Returns:
        list[logging.Handler]: The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [console_handler(settings)]
    if settings.log_path is not None:
        handlers.append(flight_recorder(settings.log_path, settings.force_flush))
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _setting(getter: Callable[[], object], variable: str, logger: Logger) -> str:
    try:
        return repr(getter())
    except config.InvalidSettingError as e:
        logger.warning("%s", e)
        return f"<invalid {os.environ.get(variable)!r}>"


def log_startup(logger: Logger, version: str, settings: LogSettings) -> None:
    """Log the effective pkgcfg settings.

    A single INFO line names the version and logging setup; DEBUG lines
    describe the runtime, the path and loader settings read from the
    environment, and per-logger overrides. Invalid ``PKGCFG_*`` values are
    reported as warnings here, before any command trips over them.
    """
    logger.info(
        "pkgcfg %s (console=%s, flight recorder=%s)",
        version,
        logging.getLevelName(settings.level),
        settings.log_path or "off",
    )
    logger.debug(
        "Python %s on %s %s, pid %d, cwd %s",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
        os.getpid(),
        Path.cwd(),
    )
    logger.debug(
        "Path separator: %s (%s)",
        _setting(config.get_path_separator, config.PATH_SEPARATOR_ENV, logger),
        config.PATH_SEPARATOR_ENV,
    )
    logger.debug(
        "HTTP loader: httpx %s, timeout %s s (%s)",
        httpx.__version__,
        _setting(config.get_http_timeout, config.HTTP_TIMEOUT_ENV, logger),
        config.HTTP_TIMEOUT_ENV,
    )
    logger.debug(
        "Logger levels: %s",
        ", ".join(
            f"{name}={logging.getLevelName(level)}"
            for name, level in sorted(settings.logger_levels.items())
        )
        or "<none>",
    )
