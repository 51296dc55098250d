"""Fixtures shared by the thing tests."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from geothing.features.things.dtos import ThingRequest
from geothing.features.things.models import Thing
from geothing.features.things.repositories.postgres_repository import (
    PostgresThingRepository,
)


@pytest.fixture
def mock_repository():
    """Create a mock thing repository."""
    return AsyncMock(spec=PostgresThingRepository)


@pytest.fixture
def thing_id() -> UUID:
    return uuid4()


@pytest.fixture
def thing_request(thing_id) -> ThingRequest:
    return ThingRequest(
        id=thing_id,
        type_id=1,
        name="Fontaine de la Place",
        description="fontaine en pierre",
        status="Utilisé",
        pos_x=2538123.45,
        pos_y=1152456.78,
    )


@pytest.fixture
def stored_thing(thing_request) -> Thing:
    return Thing(
        **thing_request.model_dump(),
        created_by=1001,
        created_at=datetime.now(timezone.utc),
    )
