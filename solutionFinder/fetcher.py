"""Bounded-time retrieval of a remote text document."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from solutionFinder.config.settings import FetcherSettings
from solutionFinder.errors import (
    FetchTimeoutError,
    InvalidRequestError,
    RemoteFailureError,
    RequestCancelledError,
    TransportFailureError,
)

LOGGER = logging.getLogger(__name__)


class ResourceFetcher:
    """Fetch raw text over HTTP with a single attempt per call.

    Each call opens its own ``httpx.AsyncClient`` so no cookies or other
    per-call state survive between lookups, and the connection is released
    on every exit path.

    Args:
        settings: Immutable source/timeout configuration
        transport: Optional httpx transport (tests inject ``httpx.MockTransport``)
    """

    def __init__(
        self,
        settings: FetcherSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self._transport = transport

    async def fetch(self, url: str, cancel_event: Optional[asyncio.Event] = None) -> str:
        """Download ``url`` and return its body as text.

        Args:
            url: Absolute http(s) URL
            cancel_event: Set by the caller to abort the in-flight request

        Raises:
            InvalidRequestError: URL is malformed or not http(s)
            TransportFailureError: network failure or body read failure
            FetchTimeoutError: the fetch exceeded ``settings.timeout``
            RemoteFailureError: non-success HTTP status
            RequestCancelledError: ``cancel_event`` was set before completion
        """
        self._validate_url(url)

        timeout = self.settings.timeout
        fetch_task = asyncio.ensure_future(self._fetch_once(url))
        watchers = [fetch_task]
        cancel_task = None
        if cancel_event is not None:
            cancel_task = asyncio.ensure_future(cancel_event.wait())
            watchers.append(cancel_task)

        try:
            done, _ = await asyncio.wait(
                watchers, timeout=timeout, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            pending = [task for task in watchers if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        if fetch_task in done:
            return fetch_task.result()

        if cancel_task is not None and cancel_task in done:
            LOGGER.warning(f"GET {url}: cancelled by caller")
            raise RequestCancelledError(f"GET {url}: request cancelled")

        LOGGER.warning(f"GET {url}: no response within {timeout:g}s")
        raise FetchTimeoutError(url, timeout)

    @staticmethod
    def _validate_url(url: str) -> None:
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as e:
            LOGGER.warning(f"Invalid URL {url!r}: {e}")
            raise InvalidRequestError(f"Invalid URL {url!r}: {e}") from e

        if parsed.scheme not in ("http", "https") or not parsed.host:
            LOGGER.warning(f"Invalid URL {url!r}: not an absolute http(s) URL")
            raise InvalidRequestError(f"Invalid URL {url!r}: expected an absolute http(s) URL")

    async def _fetch_once(self, url: str) -> str:
        settings = self.settings
        headers = {"Accept": settings.accept, "User-Agent": settings.user_agent}

        LOGGER.debug(f"GET {url} (timeout={settings.timeout:g}s)")
        async with httpx.AsyncClient(
            timeout=settings.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            try:
                request = client.build_request("GET", url, headers=headers)
            except httpx.InvalidURL as e:
                LOGGER.warning(f"GET {url}: invalid request: {e}")
                raise InvalidRequestError(f"GET {url}: {e}") from e

            try:
                response = await client.send(request, stream=True)
            except httpx.TimeoutException as e:
                LOGGER.warning(f"GET {url}: timed out: {e}")
                raise FetchTimeoutError(url, settings.timeout) from e
            except httpx.UnsupportedProtocol as e:
                LOGGER.warning(f"GET {url}: invalid request: {e}")
                raise InvalidRequestError(f"GET {url}: {e}") from e
            except httpx.HTTPError as e:
                LOGGER.warning(f"GET {url}: transport failure: {e}")
                raise TransportFailureError(f"GET {url}: {e}") from e

            try:
                if not response.is_success:
                    body = await self._read_capped(response, settings.max_error_body_bytes)
                    LOGGER.warning(f"GET {url}: status {response.status_code}")
                    raise RemoteFailureError(
                        url, response.status_code, response.reason_phrase, body
                    )

                try:
                    await response.aread()
                except httpx.TimeoutException as e:
                    LOGGER.warning(f"GET {url}: timed out reading body: {e}")
                    raise FetchTimeoutError(url, settings.timeout) from e
                except httpx.HTTPError as e:
                    LOGGER.warning(f"GET {url}: body read failed: {e}")
                    raise TransportFailureError(f"GET {url}: reading body: {e}") from e

                text = response.text
                LOGGER.info(f"GET {url}: {response.status_code} ({len(text)} chars)")
                return text
            finally:
                await response.aclose()

    @staticmethod
    async def _read_capped(response: httpx.Response, limit: int) -> str:
        """Read at most ``limit`` bytes of an error body for diagnostics."""
        chunks = bytearray()
        if limit <= 0:
            return ""
        try:
            async for chunk in response.aiter_bytes():
                chunks.extend(chunk)
                if len(chunks) >= limit:
                    break
        except httpx.HTTPError as e:
            LOGGER.debug(f"Error body read interrupted: {e}")
        return bytes(chunks[:limit]).decode(response.encoding, errors="replace")


__all__ = ["ResourceFetcher"]
