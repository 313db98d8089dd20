"""
Async HTTP transport for the notes API using aiohttp.
"""

import json
import logging
import uuid
from typing import TYPE_CHECKING
from typing import Any

import aiohttp

from ..types import HTTPResponse

if TYPE_CHECKING:
    from .logger import HTTPLogger

logger = logging.getLogger(__name__)


class HTTPClient:
    """
    Async HTTP client returning raw responses.

    Unlike a typical API client this never raises on HTTP status; deciding
    what counts as success is left to the caller. Transport failures
    (``aiohttp.ClientError``, timeouts) propagate unchanged.
    """

    def __init__(
        self,
        timeout: float | None = None,
        logger: "HTTPLogger | None" = None,
    ):
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        self._logger = logger

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """
        Send a request without a body and read the whole response.

        Args:
            method: HTTP method (GET, DELETE)
            url: Absolute URL
            headers: Optional HTTP headers

        Returns:
            HTTPResponse with status, body text and URL
        """
        return await self._send(method, url, headers or {}, None, None)

    async def send_json(
        self,
        method: str,
        url: str,
        payload: Any,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """
        Send a JSON body and read the whole response.

        The payload is always serialized, so ``None`` goes out as ``null``.

        Args:
            method: HTTP method (POST, PUT)
            url: Absolute URL
            payload: JSON-serializable body
            headers: Optional HTTP headers; Content-Type defaults to application/json

        Returns:
            HTTPResponse with status, body text and URL
        """
        headers = {"Content-Type": "application/json", **(headers or {})}
        return await self._send(method, url, headers, payload, json.dumps(payload))

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        payload: Any,
        data: str | None,
    ) -> HTTPResponse:
        request_id = uuid.uuid4().hex[:12]

        if self._logger:
            self._logger.log_request(method, url, headers, payload, request_id)

        logger.debug(f"{method} {url}")
        session = await self._get_session()
        async with session.request(method, url, data=data, headers=headers) as resp:
            # Undecodable bytes must not hide the status from the caller
            body = await resp.text(errors="replace")

            if self._logger:
                self._logger.log_response(url, resp.status, body, request_id)

            logger.debug(f"{method} {url} -> {resp.status}")
            return HTTPResponse(status=resp.status, body=body, url=url)

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "HTTPClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
