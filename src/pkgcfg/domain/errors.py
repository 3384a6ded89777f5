"""Domain-layer error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .uri import Uri

# ============================================================================
#                           General domain errors
# ============================================================================


class PackageConfigError(Exception):
    """Base class for package configuration errors."""


class PackageConfigArgumentError(PackageConfigError, ValueError):
    """Raised when a caller-supplied value fails validation.

    Attributes:
        value: The offending value (usually a `Uri`).
        name: The name of the field or parameter the value was supplied for.
        message: Human-readable reason for the rejection.
    """

    def __init__(self, value: Uri | str, name: str, message: str) -> None:
        super().__init__(f"Invalid argument ({name}): {message}: {value}")
        self.value = value
        self.name = name
        self.message = message


class UriParseError(PackageConfigError, ValueError):
    """Raised when a string cannot be parsed as a URI."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Cannot parse URI {text!r}: {reason}.")
        self.text = text
        self.reason = reason


# ============================================================================
#                           Loader related errors
# ============================================================================


class UnsupportedSchemeError(PackageConfigError):
    """Raised when a URI uses a scheme the loader cannot fetch."""

    def __init__(self, uri: Uri) -> None:
        super().__init__(f"Default URI unsupported scheme: {uri}")
        self.uri = uri
