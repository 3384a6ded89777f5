"""Default byte loader for ``file:``, ``http:`` and ``https:`` URIs.

Local files are read in a worker thread so the event loop is not blocked;
HTTP(S) resources are fetched with `httpx.AsyncClient`. Any outcome other
than a readable file or a ``200 OK`` response is reported as ``None``
("unavailable"). Transport failures (DNS, refused connections, timeouts)
propagate as `httpx.HTTPError`.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from pkgcfg import __version__, config
from pkgcfg.domain.errors import UnsupportedSchemeError
from pkgcfg.domain.uri import Uri
from pkgcfg.interfaces.loader import ByteLoader

logger = logging.getLogger(__name__)

HTTP_SCHEMES = frozenset({"http", "https"})
USER_AGENT = f"pkgcfg/{__version__}"


def build_async_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the loader's defaults.

    Args:
        timeout: Timeout in seconds; defaults to `config.get_http_timeout()`.
    """
    if timeout is None:
        timeout = config.get_http_timeout()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    )


def _read_file(uri: Uri) -> bytes | None:
    path = uri.to_file_path()
    try:
        return path.read_bytes()
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        return None


async def _http_get(client: httpx.AsyncClient, uri: Uri) -> bytes | None:
    response = await client.get(str(uri))
    if response.status_code != httpx.codes.OK:
        logger.debug("GET %s returned %s", uri, response.status_code)
        return None
    return response.content


class DefaultByteLoader(ByteLoader):
    """Byte loader backed by the local filesystem and httpx."""

    def __init__(
        self, client: httpx.AsyncClient | None = None, timeout: float | None = None
    ) -> None:
        """
        Args:
            client: Client to use for HTTP(S) fetches. When omitted a client is
                created per fetch and closed afterwards.
            timeout: Timeout for clients created by the loader.
        """
        self._client = client
        self._timeout = timeout

    async def load(self, uri: Uri) -> bytes | None:
        logger.debug("Loading %s", uri)
        if uri.scheme == "file":
            return await asyncio.to_thread(_read_file, uri)
        if uri.scheme in HTTP_SCHEMES:
            if self._client is not None:
                return await _http_get(self._client, uri)
            async with build_async_client(self._timeout) as client:
                return await _http_get(client, uri)
        raise UnsupportedSchemeError(uri)


async def default_loader(
    uri: Uri,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> bytes | None:
    """Load the bytes behind ``uri`` with a `DefaultByteLoader`.

    Returns:
        bytes | None: The content, or None if the resource is unavailable.

    Raises:
        UnsupportedSchemeError: If the scheme is not file, http or https.
    """
    return await DefaultByteLoader(client=client, timeout=timeout).load(uri)
