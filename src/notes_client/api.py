"""
Module-level shortcuts against the default notes server.

Each function opens a short-lived :class:`NotesClient` on
``DEFAULT_BASE_URL`` and closes it before returning. Use ``NotesClient``
directly to pick another server or to reuse one connection pool.
"""

from typing import Any

from .client import NotesClient
from .types import JsonValue
from .types import Note


async def get_notes() -> Any:
    """Fetch all notes from the default server."""
    async with NotesClient() as client:
        return await client.list_notes()


async def get_note(note_id: int | str) -> Note:
    """Fetch one note by id from the default server."""
    async with NotesClient() as client:
        return await client.get_note(note_id)


async def create_note(payload: JsonValue) -> Note:
    """Create a note on the default server."""
    async with NotesClient() as client:
        return await client.create_note(payload)


async def update_note(note_id: int | str, payload: JsonValue) -> Note:
    """Update a note on the default server."""
    async with NotesClient() as client:
        return await client.update_note(note_id, payload)


async def delete_note(note_id: int | str) -> bool:
    """Delete a note on the default server; True on success."""
    async with NotesClient() as client:
        return await client.delete_note(note_id)
