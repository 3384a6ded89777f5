"""Unit tests for pkgcfg.domain.relativize.

Covers `relativize_uri` (fall-backs, the three relative result shapes and the
round trip through `Uri.resolve`) and the two structural predicates
`is_absolute_directory_uri` and `is_uri_prefix`.
"""

from dataclasses import replace

import pytest

from pkgcfg.domain.relativize import (
    is_absolute_directory_uri,
    is_uri_prefix,
    relativize_uri,
)
from pkgcfg.domain.uri import Uri

# pylint: disable=magic-value-comparison


def relativize(target: str, base: str) -> Uri:
    """Relativize parsed URI texts."""
    return relativize_uri(Uri.parse(target), Uri.parse(base))


# ---------------------------------------------------------------------------
# Relative results
# ---------------------------------------------------------------------------

RELATIVE_CASES = [
    # (target, base, expected path)
    ("file:///a/b/c.dart", "file:///a/b/", "c.dart"),
    ("file:///a/d.dart", "file:///a/b/c/", "../../d.dart"),
    ("file:///a/b/c.dart", "file:///a/b/x.dart", "c.dart"),
    ("file:///a/b/c/d.dart", "file:///a/b/", "c/d.dart"),
    ("file:///a/b/", "file:///a/b/x.dart", "./"),
    ("file:///a/b/", "file:///a/b/c/x.dart", "../"),
    ("file:///a/x/y.dart", "file:///a/b/c/", "../../x/y.dart"),
    ("file:///a/b.dart", "file:///", "a/b.dart"),
    ("file:///a/b.dart", "file:///x.dart", "a/b.dart"),
    ("file:///a/./b/../c.dart", "file:///a/x/../", "c.dart"),
    ("file:///a/c:d.dart", "file:///a/", "./c:d.dart"),
    ("file:///a//b.dart", "file:///a/", ".//b.dart"),
    ("file:///a/b/c.dart?x=1#frag", "file:///a/b/", "c.dart"),
    ("http://u@h/a/b.dart", "http://u@h/a/", "b.dart"),
    ("file:/a/b/c.dart", "file:/a/b/", "c.dart"),
]

# Authorities that compare equal without being spelled the same.
EQUIVALENT_AUTHORITY_CASES = [
    ("https://H:443/a/b/c.dart", "https://h/a/x.dart", "b/c.dart"),
    ("http://Example.com/a/b.dart", "http://example.com/a/", "b.dart"),
    ("http://h:80/a/b.dart", "http://h/a/", "b.dart"),
]


@pytest.mark.parametrize(
    ("target", "base", "path"), RELATIVE_CASES + EQUIVALENT_AUTHORITY_CASES
)
def test_relative_result(target: str, base: str, path: str) -> None:
    """A shared leading path yields a path-only reference."""
    result = relativize(target, base)
    assert result == Uri(path=path)


@pytest.mark.parametrize(
    ("target", "base", "path"), RELATIVE_CASES + EQUIVALENT_AUTHORITY_CASES
)
def test_relative_result_resolves_to_target(target: str, base: str, path: str) -> None:
    """Resolving the result against the base gives the target back."""
    target_uri = Uri.parse(target)
    base_uri = Uri.parse(base)
    result = relativize_uri(target_uri, base_uri)
    expected = replace(target_uri, query=None, fragment=None).normalize_path()
    assert base_uri.resolve(result) == expected, path


def test_base_directory_itself_is_current_directory() -> None:
    """A target equal to the base directory yields './', never an empty path."""
    base = Uri.parse("file:///a/b/")
    assert relativize_uri(base, base) == Uri(path="./")
    assert str(relativize(target="file:///a/b", base="file:///a/b/")) == "./"


def test_descendant_directory_loses_trailing_slash() -> None:
    """A trailing empty segment of the target is not part of the result."""
    assert relativize("file:///a/b/c/", "file:///a/") == Uri(path="b/c")


# ---------------------------------------------------------------------------
# Fall-backs returning the target
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("target", "base"),
    [
        ("http:///a/b/c.dart", "file:///a/b/"),
        ("file://host/a/b.dart", "file:///a/"),
        ("file:/a/b.dart", "file:///a/"),
        ("file:///a/b.dart", "file:/a/"),
        ("http://u@h/a/b.dart", "http://h/a/"),
        ("http://h:8080/a/b.dart", "http://h/a/"),
        ("ws://h:80/a/b.dart", "ws://h/a/"),
        ("https://h:80/a/b.dart", "https://h/a/"),
        ("file:///x/y.dart", "file:///a/b/"),
        ("package:foo/bar.dart", "package:baz/"),
    ],
)
def test_unrelated_target_is_returned(target: str, base: str) -> None:
    """Different scheme, authority or no common prefix returns the target."""
    assert relativize(target, base) == Uri.parse(target)


def test_returned_target_drops_query_and_fragment() -> None:
    """The unchanged target still loses its query and fragment."""
    assert str(relativize("http://h/a?x#y", "file:///a/")) == "http://h/a"


def test_stripping_keeps_missing_authority_missing() -> None:
    """Removing the query never adds an empty authority."""
    result = relativize("file:/a/b?x", "http://h/")
    assert not result.has_authority
    assert str(result) == "file:/a/b"


def test_stripping_keeps_authority() -> None:
    """Removing the query keeps user-info, host and port."""
    result = relativize("http://u@h:81/a?x", "file:///")
    assert str(result) == "http://u@h:81/a"


@pytest.mark.parametrize("target", ["a/b.dart", "a/b.dart?q#f", "../x", "//h/a"])
def test_relative_target_is_returned(target: str) -> None:
    """A target without a scheme is returned as is, minus query and fragment."""
    expected = replace(Uri.parse(target), query=None, fragment=None)
    assert relativize(target, "file:///a/") == expected


def test_base_must_be_absolute() -> None:
    """A base without a scheme is a programming error."""
    with pytest.raises(AssertionError):
        relativize("file:///a/b", "/a/")


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("file:///a/b/", True),
        ("file:///a/b", False),
        ("package:foo/", True),
        ("file:///a/../", True),
        ("/a/b/", False),
        ("file:///a/b/?q", False),
        ("file:///a/b/#f", False),
        ("http://h", False),
    ],
)
def test_is_absolute_directory_uri(text: str, expected: bool) -> None:
    """Scheme, no query, no fragment and a trailing '/' are all required."""
    assert is_absolute_directory_uri(Uri.parse(text)) is expected


@pytest.mark.parametrize(
    ("prefix", "path", "expected"),
    [
        ("file:///a/", "file:///a/b.dart", True),
        ("file:///a/", "file:///a/", True),
        ("file:///a/", "file:///ab", False),
        ("file:///a/b/", "file:///a/", False),
        ("file:///a/", "file:///a/../b", True),
        ("http://h/a/", "https://h/a/b", False),
    ],
)
def test_is_uri_prefix(prefix: str, path: str, expected: bool) -> None:
    """The test is a plain string prefix test on the rendered URIs."""
    assert is_uri_prefix(Uri.parse(prefix), Uri.parse(path)) is expected


@pytest.mark.parametrize(
    ("prefix", "path"),
    [
        ("file:///a", "file:///a/b"),
        ("file:///a/?q", "file:///a/b"),
        ("file:///a/#f", "file:///a/b"),
        ("file:///a/", "file:///a/b?q"),
        ("file:///a/", "file:///a/b#f"),
    ],
)
def test_is_uri_prefix_preconditions(prefix: str, path: str) -> None:
    """Violated preconditions are caught by assertions."""
    with pytest.raises(AssertionError):
        is_uri_prefix(Uri.parse(prefix), Uri.parse(path))
