"""Shared fixtures: an in-process notes server and clients pointed at it."""

from collections.abc import AsyncIterator
from collections.abc import Awaitable
from collections.abc import Callable
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer
from notes_server import NotesBackend
from notes_server import base_url

from notes_client import NotesClient

ServeApp = Callable[..., Awaitable[NotesClient]]


@pytest.fixture
def backend() -> NotesBackend:
    """A fresh in-memory notes backend."""
    return NotesBackend()


@pytest_asyncio.fixture
async def serve_app() -> AsyncIterator[ServeApp]:
    """
    Start aiohttp apps on free ports and hand back clients for them.

    Usage:
        async def test_x(serve_app):
            client = await serve_app(scripted_app(404, "not found"))
            await client.get_note(1)

    Servers and clients are closed when the test finishes.
    """
    servers: list[TestServer] = []
    clients: list[NotesClient] = []

    async def start(app: web.Application, **client_kwargs: Any) -> NotesClient:
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        client = NotesClient(base_url=base_url(server), **client_kwargs)
        clients.append(client)
        return client

    yield start

    for client in clients:
        await client.close()
    for server in servers:
        await server.close()


@pytest_asyncio.fixture
async def client(backend: NotesBackend, serve_app: ServeApp) -> NotesClient:
    """A client talking to the ``backend`` fixture's server."""
    return await serve_app(backend.app())
