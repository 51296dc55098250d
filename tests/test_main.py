"""Tests for the application wiring: health, readiness, app info and start-up check."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from geothing.core.errors import StorageError
from geothing.db.postgres.connection import Database, get_database
from geothing.main import app, check_type_things_present


@pytest.fixture
def mock_db():
    return AsyncMock(spec=Database)


@pytest.fixture
def client(mock_db):
    app.dependency_overrides[get_database] = lambda: mock_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_does_not_touch_the_database(client, mock_db):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert "X-Request-Id" in response.headers
    mock_db.fetchval.assert_not_awaited()


def test_readiness(client, mock_db):
    mock_db.fetchval.return_value = 1

    response = client.get("/readiness")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}
    mock_db.fetchval.assert_awaited_once_with("SELECT 1;")


def test_readiness_when_database_is_down(client, mock_db):
    mock_db.fetchval.side_effect = StorageError()

    response = client.get("/readiness")

    assert response.status_code == 503
    assert response.json() == {"status": "not ready"}


def test_app_info(client):
    body = client.get("/goAppInfo").json()

    assert body["app"] == "geothing"
    assert "version" in body


@pytest.mark.asyncio
async def test_start_up_refuses_an_empty_type_thing_table(mock_db):
    mock_db.get_query_int.return_value = 0

    with pytest.raises(StorageError):
        await check_type_things_present(mock_db, "geothing")


@pytest.mark.asyncio
async def test_start_up_accepts_seeded_type_things(mock_db):
    mock_db.get_query_int.return_value = 3

    assert await check_type_things_present(mock_db, "geothing") == 3
