from uuid import uuid4

import pytest

from src.app.db.session import engine

API = "/api/v1"


@pytest.mark.asyncio
async def test_list_users(client, seeded):
    response = await client.get(f"{API}/users", params={"sort": "username"})
    assert response.status_code == 200
    body = response.json()
    assert [u["attributes"]["username"] for u in body["data"]] == ["john", "tom"]
    assert body["meta"] == {"totalResourceCount": 2}

    john = body["data"][0]
    assert john["type"] == "users"
    assert john["relationships"]["roles"]["links"] == {
        "self": f"{API}/users/{john['id']}/relationships/roles",
        "related": f"{API}/users/{john['id']}/roles",
    }


@pytest.mark.asyncio
async def test_list_roles_paged(client, seeded):
    response = await client.get(f"{API}/roles", params={"sort": "name", "page[limit]": "1"})
    assert response.status_code == 200
    body = response.json()
    assert [r["attributes"]["name"] for r in body["data"]] == ["ROLE_ADMIN"]
    assert body["meta"]["totalResourceCount"] == 2


@pytest.mark.asyncio
async def test_get_user_and_role(client, seeded):
    tom = seeded.users["tom"]
    response = await client.get(f"{API}/users/{tom.id}")
    assert response.status_code == 200
    assert response.json()["data"]["attributes"] == {"username": "tom", "email": "tom@test.com"}

    role = seeded.roles["ROLE_USER"]
    response = await client.get(f"{API}/roles/{role.id}")
    assert response.status_code == 200
    assert response.json()["data"]["links"]["self"] == f"{API}/roles/{role.id}"


@pytest.mark.asyncio
async def test_get_unknown_user_is_not_found(client, seeded):
    response = await client.get(f"{API}/users/{uuid4()}")
    assert response.status_code == 404
    assert response.json()["errors"][0]["status"] == "404"


@pytest.mark.asyncio
async def test_create_role(client):
    response = await client.post(
        f"{API}/roles", json={"data": {"type": "roles", "attributes": {"name": "ROLE_AUDITOR"}}}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["data"]["attributes"] == {"name": "ROLE_AUDITOR"}
    assert response.headers["location"] == f"{API}/roles/{body['data']['id']}"


@pytest.mark.asyncio
async def test_create_user_with_roles(client, seeded):
    document = {
        "data": {
            "type": "users",
            "attributes": {"username": "ann", "email": "ann@test.com"},
            "relationships": {
                "roles": {"data": [{"type": "roles", "id": str(seeded.roles["ROLE_ADMIN"].id)}]}
            },
        }
    }
    response = await client.post(f"{API}/users", json=document)
    assert response.status_code == 201
    user_id = response.json()["data"]["id"]

    response = await client.get(f"{API}/users/{user_id}/roles")
    assert [r["attributes"]["name"] for r in response.json()["data"]] == ["ROLE_ADMIN"]


@pytest.mark.asyncio
async def test_create_user_rejects_bad_email_and_type(client):
    response = await client.post(
        f"{API}/users",
        json={"data": {"type": "users", "attributes": {"username": "x", "email": "not-an-email"}}},
    )
    assert response.status_code == 422

    response = await client.post(
        f"{API}/users",
        json={"data": {"type": "roles", "attributes": {"username": "x", "email": "x@test.com"}}},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_user(client, seeded):
    tom = seeded.users["tom"]
    response = await client.delete(f"{API}/users/{tom.id}")
    assert response.status_code == 204

    assert (await client.get(f"{API}/users/{tom.id}")).status_code == 404
    assert (await client.delete(f"{API}/users/{tom.id}")).status_code == 404
    response = await client.get(f"{API}/roles")
    assert len(response.json()["data"]) == 2


@pytest.mark.asyncio
async def test_healthz(client):
    try:
        response = await client.get("/healthz")
    finally:
        await engine.dispose()
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
