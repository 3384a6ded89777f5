"""Top-level ``pkgcfg`` command.

The group only sets up logging; the work happens in the subcommands from
`pkgcfg.entrypoints.cli.commands`:

- ``check-name``: validate package names.
- ``check-uri``: validate a ``package:`` URI and print its package name.
- ``relativize``: express a URI relative to a base URI.
- ``is-dir``: test for an absolute directory URI.
- ``is-prefix``: test whether one URI is a prefix of another.
- ``fetch``: load the bytes behind a file/http(s) URI.

Examples
    $ pkgcfg check-uri package:foo/bar.dart
    $ pkgcfg -vv relativize file:///a/d.dart file:///a/b/c/
    $ pkgcfg --force-flush --log-path run.log fetch .dart_tool/package_config.json
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from pkgcfg import __version__
from pkgcfg.logging import LogSettings, configure_logging, log_startup, verbosity_level

from .commands import check_name, check_uri, fetch, is_dir, is_prefix, relativize
from .helpers import parse_log_level

logger = logging.getLogger(__name__)

LOG_FILE_NAME = "pkgcfg.log"


def default_log_path() -> Path:
    """Flight-recorder file in the per-user log directory."""
    return Path(user_log_dir("pkgcfg", appauthor=False, ensure_exists=True)) / LOG_FILE_NAME


@clickx.extra_group(
    version=__version__,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Show more log output (INFO with -v, DEBUG with -vv).",
)
@click.option(
    "-q",
    "--quiet",
    count=True,
    help="Show less log output (ERROR with -q, CRITICAL with -qq).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with logger names and source lines.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="PKGCFG_LOG_PATH",
    show_envvar=True,
    help=f"Flight-recorder file [default: <user log dir>/{LOG_FILE_NAME}].",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="PKGCFG_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory and write them to --log-path "
        "when a WARNING or worse is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar="PKGCFG_FORCE_FLUSH",
    show_envvar=True,
    help="Write the flight recorder to --log-path on exit, even without a WARNING.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="PKGCFG_LOGGER_LEVEL",
    show_envvar=True,
    help="Minimum level for one logger, as NAME=LEVEL (e.g. -L httpx=DEBUG).",
)
@clickx.pass_context
def pkgcfg(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Validate package names and package: URIs, and relativize URIs the way
    package-resolution configuration files store them."""
    settings = LogSettings(
        level=verbosity_level(verbose, quiet),
        debug=debug,
        color=ctx.color is not False,
        log_path=(log_path or default_log_path()) if flight_recorder else None,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    configure_logging(settings)
    log_startup(logger, __version__, settings)
    ctx.call_on_close(logging.shutdown)


for command in (check_name, check_uri, relativize, is_dir, is_prefix, fetch):
    pkgcfg.add_command(command)
