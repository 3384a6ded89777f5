"""Interface for byte loaders."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pkgcfg.domain.uri import Uri

# pylint: disable=too-few-public-methods


class ByteLoader(abc.ABC):
    """Contract for fetching the raw bytes behind a URI."""

    @abc.abstractmethod
    async def load(self, uri: Uri) -> bytes | None:
        """Load the content of ``uri``.

        Args:
            uri: Absolute URI of the resource.

        Returns:
            bytes | None: The content, or None if the resource is unavailable.

        Raises:
            UnsupportedSchemeError: If the loader cannot fetch URIs with this
                scheme.
        """
