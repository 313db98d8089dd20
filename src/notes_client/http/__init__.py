"""HTTP transport submodule for the notes client."""

from .client import HTTPClient
from .logger import FileHTTPLogger
from .logger import HTTPLogger

__all__ = [
    "FileHTTPLogger",
    "HTTPClient",
    "HTTPLogger",
]
