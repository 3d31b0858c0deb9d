"""Status routes."""

from uuid import uuid4


async def test_create_and_list_statuses(client, seed_project):
    res = await client.post(
        "/api/v1/statuses",
        json={"name": "done", "project_id": str(seed_project.id)},
    )
    assert res.status_code == 201

    res = await client.get(
        "/api/v1/statuses", params={"project_id": str(seed_project.id)},
    )
    assert res.status_code == 200
    assert [s["name"] for s in res.json()] == ["done"]


async def test_create_status_unknown_project(client):
    res = await client.post(
        "/api/v1/statuses", json={"name": "done", "project_id": str(uuid4())},
    )
    assert res.status_code == 400


async def test_get_status(client, seed_status):
    res = await client.get(f"/api/v1/statuses/{seed_status.id}")
    assert res.status_code == 200
    assert res.json()["project_id"] == str(seed_status.project_id)


async def test_get_status_invalid_id(client):
    assert (await client.get("/api/v1/statuses/nope")).status_code == 400


async def test_patch_status(client, seed_status):
    res = await client.patch(
        f"/api/v1/statuses/{seed_status.id}", json={"name": "doing"},
    )
    assert res.status_code == 200
    assert res.json()["name"] == "doing"


async def test_delete_status(client, seed_status):
    res = await client.delete(f"/api/v1/statuses/{seed_status.id}")
    assert res.status_code == 204
    res = await client.get(f"/api/v1/statuses/{seed_status.id}")
    assert res.status_code == 404
