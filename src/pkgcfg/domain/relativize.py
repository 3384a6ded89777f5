"""Relativization of URIs and structural URI predicates.

`relativize_uri` computes a path-only reference that, resolved against a base
URI, yields the target URI again. When no such reference would help (different
scheme or authority, or no shared leading path segment) the target is returned
unchanged, so the result may still be absolute.
"""

import logging
from dataclasses import replace

from .uri import Uri

logger = logging.getLogger(__name__)

CURRENT_DIRECTORY = "./"
PARENT_DIRECTORY = "../"


def _same_authority(uri: Uri, base_uri: Uri) -> bool:
    if uri.has_authority != base_uri.has_authority:
        return False
    if not uri.has_authority:
        return True
    return (
        uri.user_info == base_uri.user_info
        and uri.host == base_uri.host
        and uri.effective_port == base_uri.effective_port
    )


def _common_prefix_length(base: list[str], target: list[str]) -> int:
    index = 0
    while index < len(base) and index < len(target):
        if base[index] != target[index]:
            break
        index += 1
    return index


def _descendant_path(segments: list[str]) -> str:
    # An empty first segment would read as "//authority" or "/absolute", and a
    # colon in it as a scheme; "./" keeps the reference relative.
    path = "/".join(segments)
    if segments and (not segments[0] or ":" in segments[0]):
        return CURRENT_DIRECTORY + path
    return path


def relativize_uri(uri: Uri, base_uri: Uri) -> Uri:
    """Attempt to express ``uri`` as a path-only reference relative to ``base_uri``.

    Any query or fragment is removed from ``uri`` first.

    - A ``uri`` without a scheme is returned as-is; pass
      ``base_uri.resolve(uri)`` instead if that is not wanted.
    - If the scheme or authority of ``uri`` differs from ``base_uri``, or the
      paths share no leading segment, ``uri`` is returned unchanged.
    - Otherwise the result is a path-only URI ``r`` with
      ``base_uri.resolve(r) == uri``. The last segment of ``base_uri`` is
      treated as a file name, not a directory.

    Args:
        uri: The target URI.
        base_uri: The base URI. Must have a scheme.

    Returns:
        Uri: A relative reference, or ``uri`` (without query and fragment).
    """
    assert base_uri.has_scheme, f"Base URI must be absolute: {base_uri}"
    if uri.has_query or uri.has_fragment:
        uri = replace(uri, query=None, fragment=None)

    # Already relative; the caller knows what they are doing.
    if not uri.has_scheme:
        return uri

    if uri.scheme != base_uri.scheme:
        logger.debug("Not relativizing %s: scheme differs from %s", uri, base_uri)
        return uri

    if not _same_authority(uri, base_uri):
        logger.debug("Not relativizing %s: authority differs from %s", uri, base_uri)
        return uri

    base = list(base_uri.normalize_path().path_segments)
    if base:
        base.pop()
    target = list(uri.normalize_path().path_segments)
    if target and not target[-1]:
        target.pop()

    index = _common_prefix_length(base, target)
    if index == len(base):
        if index == len(target):
            return Uri(path=CURRENT_DIRECTORY)
        return Uri(path=_descendant_path(target[index:]))
    if index > 0:
        parents = PARENT_DIRECTORY * (len(base) - index)
        return Uri(path=parents + "/".join(target[index:]))
    logger.debug("Not relativizing %s: no common path prefix with %s", uri, base_uri)
    return uri


def is_absolute_directory_uri(uri: Uri) -> bool:
    """Check whether a URI is just an absolute directory.

    The URI must have a scheme, no query and no fragment, and its path must
    end with ``/``. The path is not normalized.
    """
    if uri.has_query:
        return False
    if uri.has_fragment:
        return False
    if not uri.has_scheme:
        return False
    return uri.path.endswith("/")


def is_uri_prefix(prefix: Uri, path: Uri) -> bool:
    """Whether ``prefix`` is a textual prefix of ``path``.

    ``prefix`` must be a directory URI (path ending in ``/``) and neither URI
    may have a query or fragment. The check is a plain string prefix test and
    is not segment aware.
    """
    assert not prefix.has_fragment
    assert not prefix.has_query
    assert not path.has_query
    assert not path.has_fragment
    assert prefix.path.endswith("/")
    return str(path).startswith(str(prefix))
