"""Pytest configuration and fixtures."""

import json
from unittest.mock import MagicMock

import pytest

from flipsearch.client.config import SearchConfig
from flipsearch.client.connection import Connection
from flipsearch.client.exceptions import NotFoundError


@pytest.fixture
def config():
    """Create a test config."""
    return SearchConfig(
        base_url="http://localhost:9200",
        timeout=30.0,
    )


@pytest.fixture
def mock_transport():
    """Create a mock transport returning empty JSON objects."""
    transport = MagicMock()
    transport.get.return_value = "{}"
    transport.head.return_value = ""
    transport.post.return_value = "{}"
    transport.put.return_value = '{"acknowledged":true}'
    transport.delete.return_value = '{"acknowledged":true}'
    return transport


@pytest.fixture
def connection(config, mock_transport):
    """Create a Connection wired to the mock transport."""
    return Connection(config, transport=mock_transport)


class FakeSearchServer:
    """In-memory stand-in for a search server's index endpoints."""

    def __init__(self, base_url: str):
        self.base_url = base_url
        self.indices: dict[str, dict] = {}

    def _name(self, url: str) -> str:
        return url[len(self.base_url) + 1:]

    def put(self, url, content=None, headers=None):
        self.indices[self._name(url)] = json.loads(content or "{}")
        return '{"acknowledged":true}'

    def delete(self, url, headers=None):
        name = self._name(url)
        if name not in self.indices:
            raise NotFoundError(f"no such index [{name}]")
        del self.indices[name]
        return '{"acknowledged":true}'

    def head(self, url, headers=None):
        name = self._name(url)
        if name not in self.indices:
            raise NotFoundError(f"no such index [{name}]")
        return ""

    def close(self):
        pass


@pytest.fixture
def fake_server():
    """Create an in-memory search server."""
    return FakeSearchServer("http://localhost:9200")
