"""
HTTP traffic logger for debugging notes API calls.

Writes every outgoing request and incoming response to a file with
timestamps and a per-request id, so that lines from concurrent calls
can be paired up afterwards.
"""

import json
from datetime import UTC
from datetime import datetime
from pathlib import Path
from typing import Any
from typing import Protocol

SENSITIVE_HEADERS = frozenset({"authorization", "x-api-key", "api-key", "cookie"})


class HTTPLogger(Protocol):
    """Protocol for HTTP logging callbacks."""

    def log_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: Any,
        request_id: str,
    ) -> None:
        """Log an outgoing HTTP request."""
        ...

    def log_response(
        self,
        url: str,
        status: int,
        body: str,
        request_id: str,
    ) -> None:
        """Log an incoming HTTP response."""
        ...


class FileHTTPLogger:
    """
    Logs HTTP traffic to a file.

    Format:
        [timestamp] [request_id] [direction] [type] payload

    Where:
        - timestamp: ISO 8601, UTC, millisecond precision
        - request_id: shared by a request and its response
        - direction: >>> for outgoing, <<< for incoming
        - type: REQUEST or RESPONSE
        - payload: JSON-formatted data
    """

    def __init__(self, log_file: Path):
        """
        Initialize the file logger.

        Args:
            log_file: Path to the log file. Parent directories are created
                      if they don't exist.
        """
        self.log_file = log_file
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.log_file.touch(exist_ok=True)

    def _write(self, request_id: str, marker: str, payload: dict[str, Any]) -> None:
        timestamp = datetime.now(UTC).isoformat(timespec="milliseconds")
        entry = f"[{timestamp}] [{request_id}] {marker} {json.dumps(payload, ensure_ascii=False)}"
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(entry + "\n")

    @staticmethod
    def _sanitize_headers(headers: dict[str, str]) -> dict[str, str]:
        """Mask sensitive header values, keeping a short prefix and suffix."""
        sanitized = {}
        for key, value in headers.items():
            if key.lower() not in SENSITIVE_HEADERS:
                sanitized[key] = value
            elif len(value) > 14:
                sanitized[key] = value[:10] + "..." + value[-4:]
            else:
                sanitized[key] = "***"
        return sanitized

    def log_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: Any,
        request_id: str,
    ) -> None:
        """Log an outgoing HTTP request."""
        payload = {
            "method": method,
            "url": url,
            "headers": self._sanitize_headers(headers),
            "body": body,
        }
        self._write(request_id, ">>> REQUEST", payload)

    def log_response(
        self,
        url: str,
        status: int,
        body: str,
        request_id: str,
    ) -> None:
        """Log an incoming HTTP response."""
        # Error bodies are often plain text
        parsed_body: Any
        try:
            parsed_body = json.loads(body) if body else body
        except json.JSONDecodeError:
            parsed_body = body

        self._write(request_id, "<<< RESPONSE", {"url": url, "status": status, "body": parsed_body})
