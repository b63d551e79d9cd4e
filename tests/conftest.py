"""
Pytest configuration and fixtures.
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a configuration file below tmp_path and return its path."""

    def write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture
def remote_client() -> Iterator[Callable[[dict[str, str]], httpx.Client]]:
    """HTTP client serving the given {path: text} pages, 404 for anything else."""
    clients: list[httpx.Client] = []

    def make(pages: dict[str, str]) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path in pages:
                return httpx.Response(200, text=pages[request.url.path])
            return httpx.Response(404, text="not found")

        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield make

    for client in clients:
        client.close()
