from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from userbase_backend.api import create_api
from userbase_backend.database import get_database


class UnreachableDatabase:
    async def ping(self) -> None:
        raise OperationalError("SELECT 1", {}, Exception("no route to host"))


@pytest.fixture
def app_client() -> Iterator[TestClient]:
    app = create_api()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health_endpoint(app_client: TestClient) -> None:
    response = app_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "service": "userbase",
        "environment": "test",
    }


def test_readiness_endpoint(app_client: TestClient) -> None:
    response = app_client.get("/readiness")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_readiness_reports_unreachable_store(app_client: TestClient) -> None:
    app_client.app.dependency_overrides[get_database] = UnreachableDatabase

    response = app_client.get("/readiness")

    assert response.status_code == 503
    assert response.json() == {"error": "Database unavailable"}
