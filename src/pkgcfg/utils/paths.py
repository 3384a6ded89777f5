"""Path string helpers working on a configurable separator.

The separator defaults to `pkgcfg.config.get_path_separator()` (``os.sep``
unless ``PKGCFG_PATH_SEPARATOR`` is set); every helper also accepts an
explicit ``separator`` so callers can handle foreign paths.
"""

from collections.abc import Iterable

from pkgcfg import config


def _separator(separator: str | None) -> str:
    return config.get_path_separator() if separator is None else separator


def file_name(path: str, separator: str | None = None) -> str:
    """Everything after the last separator, or ``path`` if there is none."""
    sep = _separator(separator)
    return path.rpartition(sep)[2]


def dir_name(path: str, separator: str | None = None) -> str:
    """Everything before the last separator, or ``""`` if there is none."""
    sep = _separator(separator)
    head, _, _ = path.rpartition(sep)
    return head


def path_join(
    part1: str, part2: str, part3: str | None = None, separator: str | None = None
) -> str:
    """Join two or three path parts.

    No separator is inserted after a part that already ends with one.
    """
    parts = [part1, part2] if part3 is None else [part1, part2, part3]
    return path_join_all(parts, separator=separator)


def path_join_all(parts: Iterable[str], separator: str | None = None) -> str:
    """Join any number of path parts.

    No separator is inserted after a part that already ends with one.
    """
    sep = _separator(separator)
    result = ""
    pending = ""
    for part in parts:
        result += pending + part
        pending = "" if part.endswith(sep) else sep
    return result
