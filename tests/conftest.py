"""
Pytest configuration and fixtures for testing
"""
import httpx
import pytest

from todo_planner_api.app.core.store import TodoStore
from todo_planner_api.app.main import create_app


@pytest.fixture
def store():
    """An empty store, isolated per test."""
    return TodoStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
async def async_client(app):
    """
    Async HTTP client bound to a fresh application.

    Requests go straight to the ASGI app through httpx's ASGI transport;
    no server is started.
    """
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def create_user(async_client):
    """Factory registering a user through the API and returning its JSON."""

    async def _create_user(name="Ana Silva", username="ana"):
        response = await async_client.post("/users", json={"name": name, "username": username})
        assert response.status_code == 201, response.text
        return response.json()

    return _create_user


@pytest.fixture
def create_todo(async_client):
    """Factory creating a todo for ``username`` through the API."""

    async def _create_todo(username="ana", title="Study FastAPI", deadline="2025-01-01"):
        return await async_client.post(
            "/todos",
            json={"title": title, "deadline": deadline},
            headers={"username": username},
        )

    return _create_todo
