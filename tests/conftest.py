"""Pytest configuration and fixtures."""

from typing import Any

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from pazarglobal_mcp.main import create_app
from pazarglobal_mcp.mcp.registry import build_registry, reset_registry
from pazarglobal_mcp.config.loader import get_settings


class FakeListingStore:
    """In-memory stand-in for the Supabase listing client."""

    def __init__(self, status: int = 201, body: Any = None, error: Exception | None = None):
        self.status = status
        self.body = body
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def insert_listing(self, listing: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(listing)
        if self.error is not None:
            raise self.error
        body = self.body if self.body is not None else [dict(listing, id=1)]
        return {"success": 200 <= self.status < 300, "status": self.status, "result": body}


@pytest.fixture
def store_factory():
    """Factory for fake listing stores with a chosen status, body or error."""
    return FakeListingStore


@pytest.fixture
def store(store_factory):
    """Fake listing store that accepts every insert with HTTP 201."""
    return store_factory()


@pytest.fixture
def registry(store):
    """Production tool set wired to the fake store."""
    return build_registry(store_client=store)


@pytest.fixture
def app(registry):
    return create_app(registry=registry)


@pytest.fixture
def client(app):
    """Synchronous test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
async def async_client(app):
    """Async test client for FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset the cached settings and global registry around each test."""
    get_settings.cache_clear()
    reset_registry()
    yield
    get_settings.cache_clear()
    reset_registry()


@pytest.fixture
def sample_jsonrpc_request():
    """Sample JSON-RPC request factory."""
    def _make_request(method: str, params: dict = None, id: Any = 1):
        return {
            "jsonrpc": "2.0",
            "id": id,
            "method": method,
            "params": params or {},
        }
    return _make_request
