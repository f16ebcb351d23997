"""
API tests for the /users routes
"""
import uuid

import pytest


@pytest.mark.asyncio
async def test_register_user(async_client):
    response = await async_client.post("/users", json={"name": "Ana Silva", "username": "ana"})

    assert response.status_code == 201
    body = response.json()
    assert uuid.UUID(body["id"]).version == 4
    assert body["name"] == "Ana Silva"
    assert body["username"] == "ana"
    assert body["pro"] is False
    assert body["todos"] == []


@pytest.mark.asyncio
async def test_register_duplicate_username(async_client, create_user):
    await create_user(username="ana")

    response = await async_client.post("/users", json={"name": "Someone", "username": "ana"})

    assert response.status_code == 400
    assert response.json() == {"error": "Username already exists"}


@pytest.mark.asyncio
async def test_register_requires_fields(async_client):
    response = await async_client.post("/users", json={"name": "Ana"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_user_by_id(async_client, create_user, create_todo):
    user = await create_user()
    await create_todo(title="listed")

    response = await async_client.get(f"/users/{user['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == user["id"]
    assert [t["title"] for t in body["todos"]] == ["listed"]


@pytest.mark.asyncio
async def test_get_unknown_user(async_client):
    response = await async_client.get(f"/users/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"error": "User doesn't exists"}


@pytest.mark.asyncio
async def test_upgrade_to_pro_twice(async_client, create_user):
    user = await create_user()

    first = await async_client.patch(f"/users/{user['id']}/pro")
    assert first.status_code == 200
    assert first.json()["pro"] is True

    second = await async_client.patch(f"/users/{user['id']}/pro")
    assert second.status_code == 400
    assert second.json() == {"error": "Pro plan is already activated."}


@pytest.mark.asyncio
async def test_upgrade_unknown_user(async_client):
    response = await async_client.patch(f"/users/{uuid.uuid4()}/pro")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_info(async_client):
    response = await async_client.get("/info")

    assert response.status_code == 200
    assert set(response.json()) == {"name", "version"}
