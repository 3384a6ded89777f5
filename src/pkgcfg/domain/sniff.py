"""Heuristics for telling configuration file formats apart."""

from .chars import CR, LBRACE, LF, SPACE, TAB

_JSON_WHITESPACE = frozenset((SPACE, TAB, LF, CR))


def first_non_whitespace_char(data: bytes) -> int:
    """Return the first byte of ``data`` that is not JSON whitespace.

    Returns:
        int: The byte value, or -1 if ``data`` is empty or all whitespace.
    """
    for byte in data:
        if byte not in _JSON_WHITESPACE:
            return byte
    return -1


def looks_like_json(data: bytes) -> bool:
    """True if ``data`` starts (after whitespace) with a JSON object."""
    return first_non_whitespace_char(data) == LBRACE
