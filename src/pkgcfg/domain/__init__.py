"""Domain layer: package-name grammar, package-URI validation and URI relativization."""

from .errors import (
    PackageConfigArgumentError,
    PackageConfigError,
    UnsupportedSchemeError,
    UriParseError,
)
from .package_name import (
    VALID_PACKAGE_NAME,
    check_package_name,
    is_valid_package_name,
)
from .package_uri import check_valid_package_uri
from .relativize import is_absolute_directory_uri, is_uri_prefix, relativize_uri
from .sniff import first_non_whitespace_char, looks_like_json
from .uri import Uri

__all__ = [
    "PackageConfigArgumentError",
    "PackageConfigError",
    "UnsupportedSchemeError",
    "UriParseError",
    "VALID_PACKAGE_NAME",
    "check_package_name",
    "is_valid_package_name",
    "check_valid_package_uri",
    "is_absolute_directory_uri",
    "is_uri_prefix",
    "relativize_uri",
    "first_non_whitespace_char",
    "looks_like_json",
    "Uri",
]
