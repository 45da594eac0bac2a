"""Shared fixtures for connector tests."""

import httpx
import pytest

from connectors.models import Connection
from connectors.registry import ConnectorRegistry


@pytest.fixture
def connection() -> Connection:
    return Connection(client_id="abc", client_secret="s3cr3t")


@pytest.fixture
def recorded():
    """Requests seen by the mock transport, newest last."""
    return []


@pytest.fixture
def mock_transport(recorded):
    """
    Build an httpx.MockTransport answering with ``status`` and ``body``.

    Every request is appended to ``recorded``.
    """

    def _build(status: int = 200, body=None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            if isinstance(body, (bytes, str)):
                return httpx.Response(status, content=body)
            return httpx.Response(status, json=body if body is not None else {})

        return httpx.MockTransport(handler)

    return _build


@pytest.fixture(autouse=True)
def fresh_registry():
    ConnectorRegistry.reset()
    yield
    ConnectorRegistry.reset()
