"""
Example demonstrating HTTP traffic logging for the notes client.

Every request and response is appended to logs/<run>.txt with a request
id, which makes it easy to see what the server actually answered when an
operation fails.
"""

import asyncio
import os
from datetime import UTC
from datetime import datetime
from logging import basicConfig
from logging import getLogger
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from notes_client import DEFAULT_BASE_URL
from notes_client import FetchError
from notes_client import NotesClient

load_dotenv()

logger = getLogger(__name__)
console = Console()


async def main() -> None:
    """Run a few calls with traffic logging enabled."""
    console.print(Panel.fit("[bold blue]notes_client Example with HTTP Logging[/bold blue]"))

    run_id = datetime.now(UTC).strftime("%Y%m%d-%H%M%S")
    log_file = Path("logs") / f"notes-{run_id}.txt"

    client = NotesClient(
        base_url=os.getenv("NOTES_API_URL", DEFAULT_BASE_URL),
        timeout=10.0,
        log_file=log_file,
    )

    try:
        notes = await client.list_notes()
        console.print(f"[green]Listed notes:[/green] {notes}")

        # Unknown id: the server's error body becomes the exception message
        try:
            await client.delete_note(999999)
        except FetchError as e:
            console.print(f"[yellow]Delete failed ({e.status}):[/yellow] {e}")
    finally:
        await client.close()

    console.print(f"\n[dim]HTTP traffic logged to: {log_file.absolute()}[/dim]")


if __name__ == "__main__":
    basicConfig(
        level="DEBUG",
        format="[%(name)s] %(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    asyncio.run(main())
