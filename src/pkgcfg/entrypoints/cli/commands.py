"""PKGCFG URI commands.

Results are printed to **stdout**, one per line, so they can be piped;
status and error lines go to **stderr**.

Failure modes
- Unparseable URI argument → ``BadParameter`` (exit code 2).
- Invalid package name or package URI → ``ClickException`` with the
  validation reason (exit code 1).
- Unavailable resource or unsupported scheme in ``fetch`` → ``ClickException``.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import click
import httpx

from pkgcfg.adapters.loader import default_loader
from pkgcfg.domain import (
    VALID_PACKAGE_NAME,
    PackageConfigArgumentError,
    UnsupportedSchemeError,
    Uri,
    UriParseError,
    check_package_name,
    check_valid_package_uri,
    is_absolute_directory_uri,
    is_uri_prefix,
    looks_like_json,
    relativize_uri,
)
from pkgcfg.domain.package_uri import describe_character

from .helpers import error, success

logger = logging.getLogger(__name__)


class UriParamType(click.ParamType):
    """Click parameter type converting text into a `Uri`."""

    name = "uri"

    def convert(self, value, param, ctx) -> Uri:
        if isinstance(value, Uri):
            return value
        try:
            return Uri.parse(value)
        except UriParseError as e:
            self.fail(e.reason, param, ctx)


URI = UriParamType()


def _echo_bool(value: bool) -> None:
    click.echo("true" if value else "false")


@click.command("check-name")
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def check_name(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Check NAMES against the package-name grammar.

    Prints ``NAME<TAB>valid`` or ``NAME<TAB>INDEX`` where INDEX is the position
    of the first offending character (the length of the name if it has no
    character other than '.'). Exits with status 1 if any name is invalid.
    """
    invalid = 0
    for name in names:
        index = check_package_name(name)
        if index == VALID_PACKAGE_NAME:
            click.echo(f"{name}\tvalid")
            continue
        invalid += 1
        click.echo(f"{name}\t{index}")
        if not name:
            error("Package names must be non-empty")
        elif index == len(name):
            error(f"{name!r} must contain at least one non-'.' character")
        else:
            error(f"{name!r} must not contain {describe_character(name[index])}")
    logger.debug("Checked %d package name(s), %d invalid", len(names), invalid)
    if invalid:
        ctx.exit(1)


@click.command("check-uri")
@click.argument("package_uri", type=URI)
@click.option(
    "--field-name",
    default="uri",
    show_default=True,
    help="Field name reported in validation errors.",
)
def check_uri(package_uri: Uri, field_name: str) -> None:
    """Validate a package: URI and print its package name."""
    try:
        package_name = check_valid_package_uri(package_uri, field_name)
    except PackageConfigArgumentError as e:
        raise click.ClickException(str(e)) from e
    click.echo(package_name)


@click.command("relativize")
@click.argument("target", type=URI)
@click.argument("base", type=URI)
def relativize(target: Uri, base: Uri) -> None:
    """Print TARGET relative to the absolute URI BASE.

    TARGET is printed unchanged (minus query and fragment) when it cannot be
    expressed relative to BASE.
    """
    if not base.has_scheme:
        raise click.BadParameter("must be an absolute URI", param_hint="BASE")
    click.echo(str(relativize_uri(target, base)))


@click.command("is-dir")
@click.argument("uri", type=URI)
def is_dir(uri: Uri) -> None:
    """Print whether URI is an absolute directory URI."""
    _echo_bool(is_absolute_directory_uri(uri))


@click.command("is-prefix")
@click.argument("prefix", type=URI)
@click.argument("path", type=URI)
def is_prefix(prefix: Uri, path: Uri) -> None:
    """Print whether the directory URI PREFIX is a prefix of PATH."""
    if prefix.has_query or prefix.has_fragment or not prefix.path.endswith("/"):
        raise click.BadParameter(
            "must be a directory URI without query or fragment",
            param_hint="PREFIX",
        )
    if path.has_query or path.has_fragment:
        raise click.BadParameter(
            "must not have a query or fragment", param_hint="PATH"
        )
    _echo_bool(is_uri_prefix(prefix, path))


@click.command("fetch")
@click.argument("location")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the bytes to this file instead of stdout.",
)
def fetch(location: str, output: Path | None) -> None:
    """Load the bytes behind LOCATION (a file/http/https URI or a local path)."""
    try:
        uri = Uri.parse(location)
    except UriParseError as e:
        # Local paths may contain spaces, which a URI may not.
        if not Path(location).exists():
            raise click.BadParameter(e.reason, param_hint="LOCATION") from e
        uri = Uri.from_file_path(location)
    if not uri.has_scheme:
        uri = Uri.from_file_path(location)

    try:
        data = asyncio.run(default_loader(uri))
    except UnsupportedSchemeError as e:
        raise click.ClickException(str(e)) from e
    except httpx.HTTPError as e:
        raise click.ClickException(f"Cannot fetch {uri}: {e}") from e
    if data is None:
        raise click.ClickException(f"{uri} is unavailable.")

    if output is None:
        click.get_binary_stream("stdout").write(data)
    else:
        output.write_bytes(data)
    kind = "JSON" if looks_like_json(data) else "non-JSON"
    success(f"Fetched {len(data)} bytes ({kind}) from {uri}")
