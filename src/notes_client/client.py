"""
Async client for the notes REST resource.
"""

import logging
import os
from pathlib import Path
from typing import Any

from .exceptions import FetchError
from .http import FileHTTPLogger
from .http import HTTPClient
from .http import HTTPLogger
from .types import HTTPResponse
from .types import JsonValue
from .types import Note

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"


class NotesClient:
    """
    Client for a notes server exposing ``/notes`` and ``/notes/{id}``.

    Every method issues exactly one request. Non-success statuses raise
    :class:`FetchError`; transport errors from aiohttp propagate as-is.
    Note bodies are passed through untouched in both directions.

    Example:
        async with NotesClient("http://localhost:8080") as client:
            note = await client.create_note({"title": "Hello", "content": "World"})
            await client.update_note(note["id"], {"title": "Hello again", "content": "World"})
            notes = await client.list_notes()
            await client.delete_note(note["id"])
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        http_logger: HTTPLogger | None = None,
        log_file: Path | str | None = None,
    ):
        """
        Initialize the notes client.

        Args:
            base_url: Server address; a trailing slash is ignored
            timeout: Total request timeout in seconds, None for no limit
            http_logger: Optional HTTP traffic logger
            log_file: Optional path for a FileHTTPLogger (ignored if http_logger is given)
        """
        self.base_url = base_url.rstrip("/")

        if http_logger is None and log_file:
            log_path = Path(log_file) if isinstance(log_file, str) else log_file
            http_logger = FileHTTPLogger(log_path)
            logger.info(f"HTTP logging enabled: {log_path}")

        self._http_logger = http_logger
        self._http = HTTPClient(timeout=timeout, logger=http_logger)

    @classmethod
    def from_env(cls) -> "NotesClient":
        """
        Build a client from environment variables.

        Reads NOTES_API_URL, NOTES_API_TIMEOUT (seconds) and NOTES_HTTP_LOG
        (traffic log path). Unset variables fall back to the defaults.
        """
        timeout = os.getenv("NOTES_API_TIMEOUT")
        return cls(
            base_url=os.getenv("NOTES_API_URL") or DEFAULT_BASE_URL,
            timeout=float(timeout) if timeout else None,
            log_file=os.getenv("NOTES_HTTP_LOG") or None,
        )

    def _url(self, note_id: int | str | None = None) -> str:
        if note_id is None:
            return f"{self.base_url}/notes"
        return f"{self.base_url}/notes/{note_id}"

    @staticmethod
    def _fail(resp: HTTPResponse, fallback: str, use_body: bool = True) -> FetchError:
        """Build the error for a failed response, preferring the body text."""
        message = resp.body if use_body and resp.body else fallback
        logger.warning(f"Request to {resp.url} failed with status {resp.status}: {message}")
        return FetchError(message, status=resp.status, body=resp.body, url=resp.url)

    async def list_notes(self) -> Any:
        """
        Fetch all notes.

        Returns:
            The parsed JSON body, exactly as the server sent it

        Raises:
            FetchError: "failed to retrieve notes" on any non-success status
        """
        resp = await self._http.request("GET", self._url())
        if not resp.ok:
            # List failures always carry the fixed message
            raise self._fail(resp, "failed to retrieve notes", use_body=False)
        return resp.json()

    async def get_note(self, note_id: int | str) -> Note:
        """Fetch a single note by id."""
        resp = await self._http.request("GET", self._url(note_id))
        if not resp.ok:
            raise self._fail(resp, "failed to retrieve note")
        return resp.json()

    async def create_note(self, payload: JsonValue) -> Note:
        """
        Create a note.

        Args:
            payload: JSON-serializable note fields, sent unchanged

        Returns:
            The created note as returned by the server

        Raises:
            FetchError: With the response text, or "failed to create note"
        """
        resp = await self._http.send_json("POST", self._url(), payload)
        if not resp.ok:
            raise self._fail(resp, "failed to create note")
        return resp.json()

    async def update_note(self, note_id: int | str, payload: JsonValue) -> Note:
        """
        Replace a note's fields.

        Raises:
            FetchError: With the response text, or "failed to update note"
        """
        resp = await self._http.send_json("PUT", self._url(note_id), payload)
        if not resp.ok:
            raise self._fail(resp, "failed to update note")
        return resp.json()

    async def delete_note(self, note_id: int | str) -> bool:
        """
        Delete a note.

        Returns:
            True once the server confirms; the body is never read

        Raises:
            FetchError: With the response text, or "failed to delete note"
        """
        resp = await self._http.request("DELETE", self._url(note_id))
        if not resp.ok and resp.status != 204:
            raise self._fail(resp, "failed to delete note")
        return True

    async def health_check(self) -> bool:
        """Ping the server's ``/healthz`` endpoint."""
        resp = await self._http.request("GET", f"{self.base_url}/healthz")
        if not resp.ok:
            raise self._fail(resp, "health check failed")
        return True

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._http.close()

    async def __aenter__(self) -> "NotesClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
