# SPDX-License-Identifier: Apache-2.0
"""HTTP transport for translation requests."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import aiohttp

logger = logging.getLogger(__name__)

# Maximum number of body characters kept in failure messages
_ERROR_EXCERPT_LENGTH = 200


class TransportFailure(Exception):
    """Transport-level failure.

    Attributes:
        status_code: HTTP status, or None when no response was received.
        message: Error description.
    """

    def __init__(self, status_code: int | None, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


@runtime_checkable
class Transport(Protocol):
    """Protocol for sending a request body and returning the raw response."""

    async def send(
        self,
        url: str,
        headers: Mapping[str, str],
        body: bytes,
        *,
        proxy: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> bytes:
        """POST ``body`` to ``url``.

        Args:
            url: Endpoint URL.
            headers: Request headers.
            body: Serialized request body.
            proxy: Optional proxy URL.
            options: Transport specific request options.

        Returns:
            Raw response body.

        Raises:
            TransportFailure: On network failure or non-2xx status.
        """
        ...


class AiohttpTransport:
    """Transport backed by an aiohttp client session.

    The session is created lazily unless one is passed in. Sessions passed in
    are not closed by this transport.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None) -> None:
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> AiohttpTransport:
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def send(
        self,
        url: str,
        headers: Mapping[str, str],
        body: bytes,
        *,
        proxy: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> bytes:
        session = await self._ensure_session()
        request_options = dict(options or {})
        if proxy:
            request_options["proxy"] = proxy

        try:
            async with session.post(
                url, data=body, headers=dict(headers), **request_options
            ) as response:
                payload = await response.read()
                if not 200 <= response.status < 300:
                    excerpt = payload.decode("utf-8", errors="replace")
                    message = excerpt[:_ERROR_EXCERPT_LENGTH] or str(response.reason)
                    logger.debug(
                        "Translation endpoint returned status %d", response.status
                    )
                    raise TransportFailure(
                        response.status,
                        f"HTTP {response.status}: {message}",
                    )
                return payload
        except aiohttp.ClientResponseError as e:
            raise TransportFailure(e.status, f"Request failed: {e.message}") from e
        except aiohttp.ClientError as e:
            raise TransportFailure(None, f"Request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportFailure(None, "Request timed out") from e

    async def close(self) -> None:
        """Close the HTTP session if this transport created it."""
        if self._session and self._owns_session:
            await self._session.close()
        self._session = None
