"""
Example walking through every notes operation against a running server.

Start the notes API locally (default http://localhost:8080) or point
NOTES_API_URL at another instance, then run this script. It creates a
note, edits it, lists everything and finally deletes the note again.
"""

import asyncio
from logging import basicConfig
from logging import getLogger
from typing import Any

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from notes_client import FetchError
from notes_client import NotesClient

load_dotenv()

logger = getLogger(__name__)
console = Console()


def render_notes(notes: Any) -> Table:
    """Render a list response as a table."""
    # The reference server wraps the list in {"data": [...], "total": n}
    items = notes.get("data", []) if isinstance(notes, dict) else notes

    table = Table(title="Notes")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Content", style="dim")
    for note in items or []:
        table.add_row(str(note.get("id", "")), note.get("title", ""), note.get("content", ""))
    return table


async def main() -> None:
    """Create, update, list and delete a note."""
    console.print(Panel.fit("[bold blue]notes_client Example[/bold blue]"))

    async with NotesClient.from_env() as client:
        console.print(f"[dim]Using server {client.base_url}[/dim]")
        await client.health_check()

        note = await client.create_note({"title": "Shopping", "content": "milk, eggs"})
        console.print(f"[green]Created note {note['id']}[/green]")

        note = await client.update_note(note["id"], {"title": "Shopping", "content": "milk, eggs, bread"})
        console.print(f"[green]Updated note {note['id']}[/green]")

        console.print(render_notes(await client.list_notes()))

        # The server rejects an empty title; its message is surfaced as-is
        try:
            await client.update_note(note["id"], {"title": "", "content": "nothing"})
        except FetchError as e:
            console.print(f"[yellow]Update rejected ({e.status}):[/yellow] {e}")

        await client.delete_note(note["id"])
        console.print(f"[green]Deleted note {note['id']}[/green]")

    console.print("\n[dim]Example complete.[/dim]")


if __name__ == "__main__":
    basicConfig(
        level="INFO",
        format="[%(name)s] %(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    asyncio.run(main())
