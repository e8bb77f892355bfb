"""End-to-end flow through the real SQLAlchemy stack on SQLite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from userbase_backend.api import create_api


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    monkeypatch.setenv("DATABASE_AUTO_CREATE", "true")
    app = create_api()
    with TestClient(app) as test_client:
        yield test_client


def test_user_lifecycle(client: TestClient) -> None:
    payload = {"email": "a@b.com", "firstName": "A", "lastName": "B", "social": {}}

    created = client.post("/users", json=payload)
    assert created.status_code == 200
    user = created.json()
    assert {key: user[key] for key in payload} == payload

    listed = client.get("/users").json()
    assert [entry["id"] for entry in listed] == [user["id"]]

    fetched = client.get(f"/users/{user['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == user

    updated = client.put(f"/users/{user['id']}", json={"firstName": "Changed"})
    assert updated.status_code == 200
    changed = updated.json()
    assert changed["firstName"] == "Changed"
    for field in ("id", "email", "lastName", "social", "createdAt"):
        assert changed[field] == user[field]

    deleted = client.delete(f"/users/{user['id']}")
    assert deleted.json() == {"message": "User deleted successfully"}

    missing = client.get(f"/users/{user['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "User not found"}


def test_duplicate_email_is_a_store_error(client: TestClient) -> None:
    payload = {"email": "a@b.com", "firstName": "A", "lastName": "B"}
    assert client.post("/users", json=payload).status_code == 200

    response = client.post("/users", json={**payload, "firstName": "Other"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create user"}
    assert len(client.get("/users").json()) == 1


def test_missing_ids_on_real_store(client: TestClient) -> None:
    assert client.get("/users/999999").status_code == 404
    assert client.put("/users/999999", json={"lastName": "X"}).status_code == 404
    assert client.delete("/users/999999").status_code == 404


def test_failed_commit_is_not_reported_as_created(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def failing_commit(self: AsyncSession) -> None:
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    with monkeypatch.context() as patch:
        patch.setattr(AsyncSession, "commit", failing_commit)
        response = client.post(
            "/users", json={"email": "a@b.com", "firstName": "A", "lastName": "B"}
        )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create user"}
    assert client.get("/users").json() == []
