"""Validation of ``package:`` URIs."""

from .errors import PackageConfigArgumentError
from .package_name import VALID_PACKAGE_NAME, check_package_name
from .uri import Uri

PACKAGE_SCHEME = "package"


def describe_character(character: str) -> str:
    """Render a character for an error message.

    Printable ASCII (0x20-0x7E) is shown as ``'c' (U+0063)``; anything else
    as the bare code point, e.g. ``U+0009``.
    """
    code = ord(character)
    code_point = f"U+{code:04x}"
    if 0x20 <= code <= 0x7E:
        return f"'{character}' ({code_point})"
    return code_point


def check_valid_package_uri(package_uri: Uri, name: str) -> str:
    """Validate that a URI is a valid ``package:`` URI.

    Args:
        package_uri: The URI to validate, typically user input.
        name: Name of the field the URI was read from, used in error messages.

    Returns:
        str: The package name, i.e. the path up to the first ``/``.

    Raises:
        PackageConfigArgumentError: If the URI is not a well-formed package
            URI or the package name is invalid.
    """
    if package_uri.scheme != PACKAGE_SCHEME:
        raise PackageConfigArgumentError(package_uri, name, "Not a package: URI")
    if package_uri.has_authority:
        raise PackageConfigArgumentError(
            package_uri, name, "Package URIs must not have a host part"
        )
    if package_uri.has_query:
        # A query has no meaning once resolved to a file: URI.
        raise PackageConfigArgumentError(
            package_uri, name, "Package URIs must not have a query part"
        )
    if package_uri.has_fragment:
        # package:foo/foo.dart#1 and #2 must not denote different libraries.
        raise PackageConfigArgumentError(
            package_uri, name, "Package URIs must not have a fragment part"
        )
    path = package_uri.path
    if path.startswith("/"):
        raise PackageConfigArgumentError(
            package_uri, name, "Package URIs must not start with a '/'"
        )
    package_name, slash, _ = path.partition("/")
    if not slash:
        raise PackageConfigArgumentError(
            package_uri,
            name,
            "Package URIs must start with the package name followed by a '/'",
        )
    bad_index = check_package_name(package_name)
    if bad_index == VALID_PACKAGE_NAME:
        return package_name
    if not package_name:
        raise PackageConfigArgumentError(
            package_uri, name, "Package names must be non-empty"
        )
    if bad_index == len(package_name):
        raise PackageConfigArgumentError(
            package_uri,
            name,
            "Package names must contain at least one non-'.' character",
        )
    bad_character = describe_character(package_name[bad_index])
    raise PackageConfigArgumentError(
        package_uri, name, f"Package names must not contain {bad_character}"
    )
