"""Protocol definition for thing repository operations."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from geothing.features.things.dtos import ThingRequest
from geothing.features.things.models import (
    CountParams,
    GeoJsonParams,
    ListParams,
    SearchParams,
    Thing,
    ThingList,
)


class ThingRepository(Protocol):
    """Storage operations of things.

    Read methods raise ``NoRowsError`` when nothing matches; every database
    failure surfaces as ``StorageError``.
    """

    async def list(self, offset: int, limit: int, params: ListParams) -> list[ThingList]:
        """Return a page of things matching the optional filters."""
        ...

    async def list_by_external_id(
        self, offset: int, limit: int, external_id: int
    ) -> list[ThingList]:
        """Return a page of things having this external id."""
        ...

    async def search(
        self, offset: int, limit: int, params: SearchParams
    ) -> list[ThingList]:
        """Return a page of things matching the filters and the keywords."""
        ...

    async def count(self, params: CountParams) -> int:
        """Return the number of things matching the filters."""
        ...

    async def geojson(self, offset: int, limit: int, params: GeoJsonParams) -> str:
        """Return the matching things as a GeoJSON FeatureCollection string."""
        ...

    async def get(self, thing_id: UUID) -> Thing:
        """Return the full thing."""
        ...

    async def exist(self, thing_id: UUID) -> bool:
        """Check whether a live thing has this id."""
        ...

    async def is_owner(self, thing_id: UUID, user_id: int) -> bool:
        """Check whether user_id created this thing."""
        ...

    async def create(self, user_id: int, thing: ThingRequest) -> Thing:
        """Insert a thing created by user_id and return it as stored."""
        ...

    async def update(self, thing_id: UUID, user_id: int, thing: ThingRequest) -> Thing:
        """Overwrite a thing on behalf of user_id and return it as stored."""
        ...

    async def delete(self, thing_id: UUID, user_id: int) -> None:
        """Soft delete a thing on behalf of user_id."""
        ...

    async def type_thing_exists(self, type_id: int) -> bool:
        """Check whether a live type thing has this id."""
        ...
