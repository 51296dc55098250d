"""Fixtures shared by the type thing tests."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from geothing.features.type_things.dtos import TypeThingRequest
from geothing.features.type_things.models import TypeThing
from geothing.features.type_things.repositories.postgres_repository import (
    PostgresTypeThingRepository,
)


@pytest.fixture
def mock_repository():
    """Create a mock type thing repository."""
    return AsyncMock(spec=PostgresTypeThingRepository)


@pytest.fixture
def type_thing_request() -> TypeThingRequest:
    return TypeThingRequest(
        name="Borne hydrante",
        description="borne incendie",
        geometry_type="Point",
        icon_path="/icons/hydrant.svg",
    )


@pytest.fixture
def stored_type_thing(type_thing_request) -> TypeThing:
    return TypeThing(
        id=7,
        **type_thing_request.model_dump(),
        created_by=960901,
        created_at=datetime.now(timezone.utc),
    )
