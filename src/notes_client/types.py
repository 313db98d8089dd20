"""
Core types for the notes client.
"""

import json
from dataclasses import dataclass
from typing import Any
from typing import TypedDict

# Type alias for JSON-compatible values (request and response bodies)
JsonValue = str | int | float | bool | None | list[Any] | dict[str, Any]

# A note is whatever the server returns; the client never inspects it
Note = dict[str, Any]


class NotePayload(TypedDict, total=False):
    """Fields accepted by the reference notes server."""

    title: str
    content: str


@dataclass
class HTTPResponse:
    """Raw outcome of a single HTTP exchange."""

    status: int
    body: str
    url: str

    @property
    def ok(self) -> bool:
        """True for 2xx statuses, same as fetch's ``Response.ok``."""
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Parse the body as JSON."""
        return json.loads(self.body)
