"""
notes_client - async client for a notes REST API.

Wraps the four note operations (list, create, update, delete) plus
single-note lookup and a health check. Each call is one HTTP exchange;
failures surface as FetchError with the server's message or a fixed
fallback.

Example:
    from notes_client import NotesClient, FetchError

    async with NotesClient("http://localhost:8080") as client:
        note = await client.create_note({"title": "Groceries", "content": "milk"})
        try:
            await client.update_note(note["id"], {"title": ""})
        except FetchError as e:
            print(f"Update rejected: {e}")
        await client.delete_note(note["id"])

Or, against the default server:
    from notes_client import get_notes

    notes = await get_notes()
"""

from .api import create_note
from .api import delete_note
from .api import get_note
from .api import get_notes
from .api import update_note
from .client import DEFAULT_BASE_URL
from .client import NotesClient
from .exceptions import FetchError
from .exceptions import NotesClientError
from .http import FileHTTPLogger
from .http import HTTPClient
from .http import HTTPLogger
from .types import HTTPResponse
from .types import JsonValue
from .types import Note
from .types import NotePayload

__all__ = [
    "DEFAULT_BASE_URL",
    "FetchError",
    "FileHTTPLogger",
    "HTTPClient",
    "HTTPLogger",
    "HTTPResponse",
    "JsonValue",
    "Note",
    "NotePayload",
    "NotesClient",
    "NotesClientError",
    "create_note",
    "delete_note",
    "get_note",
    "get_notes",
    "update_note",
]
