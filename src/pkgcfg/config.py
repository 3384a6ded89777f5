"""Configuration utilities for PKGCFG.

This module centralizes small helpers and constants related to application configuration.
"""

import os

PATH_SEPARATOR_ENV = "PKGCFG_PATH_SEPARATOR"  # pragma: no mutate
HTTP_TIMEOUT_ENV = "PKGCFG_HTTP_TIMEOUT"  # pragma: no mutate

DEFAULT_HTTP_TIMEOUT = 30.0


class InvalidSettingError(Exception):
    """Raised when a PKGCFG_* environment variable holds an unusable value."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        super().__init__(f"{variable}={value!r} is invalid: {reason}.")
        self.variable = variable
        self.value = value
        self.reason = reason


def get_path_separator() -> str:
    """Get the path separator used by the path helpers.

    Returns:
        The value of `PKGCFG_PATH_SEPARATOR`, or `os.sep` if it is not set.

    Raises:
        InvalidSettingError: If `PKGCFG_PATH_SEPARATOR` is set but empty.
    """
    if (separator := os.environ.get(PATH_SEPARATOR_ENV)) is None:
        return os.sep
    if not separator:
        raise InvalidSettingError(PATH_SEPARATOR_ENV, separator, "must not be empty")
    return separator


def get_http_timeout() -> float:
    """Get the timeout, in seconds, for HTTP fetches by the default loader.

    Returns:
        The value of `PKGCFG_HTTP_TIMEOUT`, or `DEFAULT_HTTP_TIMEOUT`.

    Raises:
        InvalidSettingError: If the value is not a positive number.
    """
    if not (raw := os.environ.get(HTTP_TIMEOUT_ENV)):
        return DEFAULT_HTTP_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as e:
        raise InvalidSettingError(HTTP_TIMEOUT_ENV, raw, "not a number") from e
    if not timeout > 0:
        raise InvalidSettingError(HTTP_TIMEOUT_ENV, raw, "must be positive")
    return timeout
