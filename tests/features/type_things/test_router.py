"""Route tests for the type thing API."""

from collections.abc import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from geothing.core.authentication import get_current_user
from geothing.core.errors import AdminRequiredError
from geothing.core.schemas import AuthenticatedUser
from geothing.features.crud.filters import ABSENT, Opt
from geothing.features.type_things import router as type_things_router
from geothing.main import app

PREFIX = "/goapi/v1/types"


@pytest.fixture
def use_case() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(
    use_case: AsyncMock, owner_user: AuthenticatedUser
) -> Generator[TestClient, None, None]:
    factories = [
        type_things_router.get_list_type_things_use_case,
        type_things_router.get_count_type_things_use_case,
        type_things_router.get_get_type_thing_use_case,
        type_things_router.get_create_type_thing_use_case,
        type_things_router.get_update_type_thing_use_case,
        type_things_router.get_delete_type_thing_use_case,
    ]
    for factory in factories:
        app.dependency_overrides[factory] = lambda: use_case
    app.dependency_overrides[get_current_user] = lambda: owner_user
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_list_uses_the_type_thing_default_limit(client, use_case):
    use_case.execute.return_value = []

    client.get(PREFIX, params={"external_id": 0})

    offset, limit, params = use_case.execute.await_args.args
    assert (offset, limit) == (0, 250)
    assert params.external_id == Opt.of(0)
    assert params.keywords == ABSENT


def test_count(client, use_case):
    use_case.execute.return_value = 4

    response = client.get(f"{PREFIX}/count", params={"inactivated": "true"})

    assert response.json() == {"count": 4}
    assert use_case.execute.await_args.args[0].inactivated == Opt.of(True)


def test_create_by_non_admin_is_403(client, use_case, type_thing_request):
    use_case.execute.side_effect = AdminRequiredError()

    response = client.post(PREFIX, json=type_thing_request.model_dump(mode="json"))

    assert response.status_code == 403
    assert response.json()["code"] == "admin_required"


def test_create_returns_201(client, use_case, type_thing_request, stored_type_thing):
    use_case.execute.return_value = stored_type_thing

    response = client.post(PREFIX, json=type_thing_request.model_dump(mode="json"))

    assert response.status_code == 201
    assert response.json()["id"] == 7


def test_delete_returns_204(client, use_case):
    response = client.delete(f"{PREFIX}/7")

    assert response.status_code == 204
    assert use_case.execute.await_args.args[1] == 7
