"""Package-name grammar.

A package name is a non-empty string of ASCII letters, digits and the
punctuation ``! $ & ' ( ) * + , - . ; = @ _ ~`` that contains at least one
character other than ``.``.
"""

import string

from .chars import DOT

VALID_PACKAGE_NAME = -1
"""Result of `check_package_name` for a valid package name."""

_ALLOWED_PUNCTUATION = "!$&'()*+,-.;=@_~"

# Indexed by code point; everything at or above 0x80 is rejected before lookup.
_VALID_CHARACTERS: tuple[bool, ...] = tuple(
    chr(code) in string.ascii_letters
    or chr(code) in string.digits
    or chr(code) in _ALLOWED_PUNCTUATION
    for code in range(0x80)
)


def is_valid_package_name_character(code: int) -> bool:
    """Return True if the code point may appear in a package name."""
    return code < 0x80 and _VALID_CHARACTERS[code]


def check_package_name(name: str) -> int:
    """Check a string against the package-name grammar.

    Args:
        name: The candidate package name.

    Returns:
        int: `VALID_PACKAGE_NAME` (-1) if the name is valid; otherwise the
        index of the first disallowed character, or ``len(name)`` if the
        name contains no character other than ``.`` (this includes the empty
        string).
    """
    non_dot = 0
    for index, character in enumerate(name):
        code = ord(character)
        if not is_valid_package_name_character(code):
            return index
        non_dot |= code ^ DOT
    if non_dot == 0:
        return len(name)
    return VALID_PACKAGE_NAME


def is_valid_package_name(name: str) -> bool:
    """Return True if ``name`` is a valid package name."""
    return check_package_name(name) == VALID_PACKAGE_NAME
