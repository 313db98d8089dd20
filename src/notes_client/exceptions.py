"""
Custom exceptions for notes_client.
"""


class NotesClientError(Exception):
    """Base exception for all notes_client errors."""

    pass


class FetchError(NotesClientError):
    """
    Raised when the notes server answers with a non-success status.

    The message is either the raw response body text (when the server sent
    one) or a fixed per-operation fallback such as "failed to create note".
    ``str(error)`` is exactly that message.

    Attributes:
        message: The error message.
        status: HTTP status code of the failed response.
        body: Raw response body text (may be empty).
        url: The URL that was requested.
    """

    def __init__(self, message: str, status: int | None = None, body: str | None = None, url: str | None = None):
        self.message = message
        self.status = status
        self.body = body
        self.url = url
        super().__init__(message)
