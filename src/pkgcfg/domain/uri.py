"""Immutable URI value object.

`Uri` keeps the distinction between an *absent* component (``None``) and an
*empty* one (``""``): ``file:///a`` has an empty host while ``file:/a`` has no
authority at all, and ``a?`` has an empty query while ``a`` has none. The
relativization and package-URI rules depend on that distinction, which
``urllib.parse`` alone does not preserve.

Hosts are lowercased and an explicit default port (80 for ``http``, 443 for
``https``) is dropped, so equivalent authorities compare equal. Text holding
whitespace or control characters is rejected rather than silently cleaned up.

Splitting is delegated to `urllib.parse.urlsplit`; path normalization and
reference resolution follow RFC 3986 §5.2.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname

from .errors import UriParseError

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True, slots=True)
class Uri:
    """Value object representing a parsed URI reference.

    Attributes:
        scheme: Lowercase scheme without the trailing ``:``, or None.
        user_info: User-info part of the authority, or None.
        host: Lowercase host part of the authority, or None when there is no
            authority.
        port: Explicit port, or None. The scheme's default port is stored as
            None, so ``http://h:80/`` equals ``http://h/``.
        path: Path, kept exactly as written (no percent-decoding).
        query: Query without the leading ``?``, or None.
        fragment: Fragment without the leading ``#``, or None.
    """

    scheme: str | None = None
    user_info: str | None = None
    host: str | None = None
    port: int | None = None
    path: str = ""
    query: str | None = None
    fragment: str | None = None

    def __post_init__(self) -> None:
        if self.host is None:
            return
        object.__setattr__(self, "host", self.host.lower())
        if self.port is not None and self.port == _DEFAULT_PORTS.get(self.scheme):
            object.__setattr__(self, "port", None)

    # --- Construction ---

    @classmethod
    def parse(cls, text: str) -> Uri:
        """Parse a URI reference.

        Args:
            text: The URI reference, absolute or relative.

        Returns:
            Uri: The parsed value.

        Raises:
            UriParseError: If the text contains whitespace or control
                characters, or the port is not a decimal number in range.
        """
        for index, character in enumerate(text):
            code = ord(character)
            if code < 0x20 or code == 0x7F or character.isspace():
                raise UriParseError(
                    text, f"invalid character U+{code:04x} at index {index}"
                )
        try:
            parts = urlsplit(text)
        except ValueError as e:
            raise UriParseError(text, str(e)) from e
        scheme = parts.scheme or None
        rest = text[len(parts.scheme) + 1 :] if scheme else text
        before_fragment, hash_sign, _ = text.partition("#")

        user_info = host = None
        port = None
        if rest.startswith("//"):
            user_info, host, port = _split_authority(text, parts.netloc)

        return cls(
            scheme=scheme,
            user_info=user_info,
            host=host,
            port=port,
            path=parts.path,
            query=parts.query if "?" in before_fragment else None,
            fragment=parts.fragment if hash_sign else None,
        )

    @classmethod
    def from_file_path(cls, path: str | Path) -> Uri:
        """Build an absolute ``file:`` URI for a local filesystem path."""
        return cls.parse(Path(path).absolute().as_uri())

    # --- Derived properties ---

    @property
    def has_scheme(self) -> bool:
        """True if the URI has a scheme."""
        return self.scheme is not None

    @property
    def has_authority(self) -> bool:
        """True if the URI has an authority, even an empty one."""
        return (
            self.host is not None
            or self.user_info is not None
            or self.port is not None
        )

    @property
    def has_query(self) -> bool:
        """True if the URI has a query, even an empty one."""
        return self.query is not None

    @property
    def has_fragment(self) -> bool:
        """True if the URI has a fragment, even an empty one."""
        return self.fragment is not None

    @property
    def is_absolute(self) -> bool:
        """True if the URI has a scheme and no fragment."""
        return self.has_scheme and not self.has_fragment

    @property
    def effective_port(self) -> int:
        """The explicit port, or the scheme's default port (0 if unknown)."""
        if self.port is not None:
            return self.port
        return _DEFAULT_PORTS.get(self.scheme or "", 0)

    @property
    def authority(self) -> str:
        """The authority rendered as ``[user_info@]host[:port]``."""
        result = ""
        if self.user_info is not None:
            result += f"{self.user_info}@"
        result += self.host or ""
        if self.port is not None:
            result += f":{self.port}"
        return result

    @property
    def path_segments(self) -> tuple[str, ...]:
        """The ``/``-separated segments of the path.

        A single leading ``/`` is not a segment boundary, so ``/a/b/`` yields
        ``("a", "b", "")`` and the empty path yields ``()``.
        """
        path = self.path
        if not path:
            return ()
        if path.startswith("/"):
            path = path[1:]
        return tuple(path.split("/"))

    # --- Transformations ---

    def normalize_path(self) -> Uri:
        """Return a copy with ``.`` and ``..`` segments removed from the path.

        Paths of URIs that have a scheme or authority, or that start with
        ``/``, are normalized per RFC 3986 §5.2.4. Other relative paths keep
        leading ``..`` segments that cannot be resolved.
        """
        if self.has_scheme or self.has_authority or self.path.startswith("/"):
            path = remove_dot_segments(self.path)
        else:
            path = remove_dot_segments(self.path, keep_leading_parents=True)
        if path == self.path:
            return self
        return replace(self, path=path)

    def resolve(self, reference: Uri | str) -> Uri:
        """Resolve a URI reference against this URI (RFC 3986 §5.2.2).

        Args:
            reference: The reference to resolve, as a `Uri` or a string.

        Returns:
            Uri: The target URI.
        """
        ref = Uri.parse(reference) if isinstance(reference, str) else reference
        if ref.has_scheme:
            return replace(ref, path=remove_dot_segments(ref.path))
        if ref.has_authority:
            return replace(
                ref, scheme=self.scheme, path=remove_dot_segments(ref.path)
            )
        if not ref.path:
            path = self.path
            query = ref.query if ref.has_query else self.query
        else:
            if ref.path.startswith("/"):
                path = remove_dot_segments(ref.path)
            else:
                path = remove_dot_segments(self._merge(ref.path))
            query = ref.query
        return Uri(
            scheme=self.scheme,
            user_info=self.user_info,
            host=self.host,
            port=self.port,
            path=path,
            query=query,
            fragment=ref.fragment,
        )

    def _merge(self, relative_path: str) -> str:
        if self.has_authority and not self.path:
            return "/" + relative_path
        return self.path[: self.path.rfind("/") + 1] + relative_path

    def to_file_path(self) -> Path:
        """Convert a ``file:`` URI to a local filesystem path.

        Raises:
            ValueError: If the URI is not a ``file:`` URI.
        """
        if self.scheme != "file":
            raise ValueError(f"Not a file: URI: {self}")
        return Path(url2pathname(self.path))

    def __str__(self) -> str:
        result = ""
        if self.scheme is not None:
            result += f"{self.scheme}:"
        if self.has_authority:
            result += f"//{self.authority}"
        result += self.path
        if self.query is not None:
            result += f"?{self.query}"
        if self.fragment is not None:
            result += f"#{self.fragment}"
        return result


def remove_dot_segments(path: str, keep_leading_parents: bool = False) -> str:
    """Remove ``.`` and ``..`` segments from a URI path.

    Args:
        path: The path to normalize.
        keep_leading_parents: Keep ``..`` segments that would climb above the
            start of a relative path instead of dropping them.

    Returns:
        str: The normalized path. A trailing ``.`` or ``..`` leaves a trailing
        ``/`` so the result still denotes a directory.
    """
    if "." not in path:
        return path
    absolute = path.startswith("/")
    segments = path.split("/")
    if absolute:
        segments = segments[1:]
    output: list[str] = []
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        if segment == ".":
            if index == last:
                output.append("")
        elif segment == "..":
            if output and not (keep_leading_parents and output[-1] == ".."):
                output.pop()
            elif keep_leading_parents and not absolute:
                output.append("..")
                continue
            if index == last:
                output.append("")
        else:
            output.append(segment)
    result = "/".join(output)
    return "/" + result if absolute else result


def _split_authority(
    text: str, netloc: str
) -> tuple[str | None, str, int | None]:
    user_info: str | None
    user_info, at_sign, host_port = netloc.rpartition("@")
    if not at_sign:
        user_info = None

    if host_port.startswith("["):
        end = host_port.find("]")
        if end < 0:
            raise UriParseError(text, "unterminated IPv6 host")
        host, port_text = host_port[: end + 1], host_port[end + 1 :]
        if port_text and not port_text.startswith(":"):
            raise UriParseError(text, "unexpected text after IPv6 host")
        port_text = port_text[1:]
    else:
        host, _, port_text = host_port.partition(":")

    if not port_text:
        return user_info, host, None
    if not port_text.isascii() or not port_text.isdigit():
        raise UriParseError(text, f"invalid port {port_text!r}")
    port = int(port_text)
    if port > 65535:
        raise UriParseError(text, f"port {port} out of range")
    return user_info, host, port
