"""Shared pytest fixtures for mvc_sync tests."""
import httpx
import pytest

from mvc_sync.di import reset_store
from mvc_sync.main import create_app
from mvc_sync.models import PRODUCTS, USERS
from mvc_sync.remote.http import HttpRemoteSource
from mvc_sync.remote.memory import InMemoryRemoteSource
from mvc_sync.storage.collection import CollectionStore


@pytest.fixture(autouse=True)
def reset_default_store():
    """Empty the process-wide store slot around each test."""
    reset_store()
    yield
    reset_store()


@pytest.fixture
def user_remote() -> InMemoryRemoteSource:
    """A simulated users API holding Ana (id 1) and Bo (id 2)."""
    return InMemoryRemoteSource(USERS, seed=[
        {"name": "Ana", "email": "ana@example.com"},
        {"name": "Bo", "email": "bo@example.com"},
    ])


@pytest.fixture
def user_store(user_remote: InMemoryRemoteSource) -> CollectionStore:
    return CollectionStore(user_remote, timeout=1.0)


@pytest.fixture
def product_remote() -> InMemoryRemoteSource:
    return InMemoryRemoteSource(PRODUCTS, seed=[
        {"name": "Laptop", "price": 999.99, "stock": 50},
        {"name": "Headphones", "price": 99.99, "stock": 0},
    ])


@pytest.fixture
def mock_app():
    """Mock REST remote with sample data."""
    return create_app(seed=True)


@pytest.fixture
def asgi_client(mock_app) -> httpx.AsyncClient:
    """httpx client wired straight into the mock app, no network."""
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=mock_app), base_url="http://mock")


@pytest.fixture
def http_user_remote(asgi_client: httpx.AsyncClient) -> HttpRemoteSource:
    return HttpRemoteSource("http://mock/api", USERS, client=asgi_client)
