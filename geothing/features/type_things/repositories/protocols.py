"""Protocol definition for type thing repository operations."""

from __future__ import annotations

from typing import Protocol

from geothing.features.type_things.dtos import TypeThingRequest
from geothing.features.type_things.models import (
    TypeThing,
    TypeThingCountParams,
    TypeThingList,
    TypeThingListParams,
)


class TypeThingRepository(Protocol):
    """Storage operations of type things."""

    async def list(
        self, offset: int, limit: int, params: TypeThingListParams
    ) -> list[TypeThingList]:
        """Return a page of type things, raising NoRowsError when empty."""
        ...

    async def count(self, params: TypeThingCountParams) -> int:
        """Return the number of type things matching the filters."""
        ...

    async def get(self, type_thing_id: int) -> TypeThing:
        """Return the full type thing, raising NoRowsError when missing."""
        ...

    async def exist(self, type_thing_id: int) -> bool:
        """Check whether a live type thing has this id."""
        ...

    async def create(self, user_id: int, type_thing: TypeThingRequest) -> TypeThing:
        """Insert a type thing and return it with its assigned id."""
        ...

    async def update(
        self, type_thing_id: int, user_id: int, type_thing: TypeThingRequest
    ) -> TypeThing:
        """Overwrite a type thing and return it as stored."""
        ...

    async def delete(self, type_thing_id: int, user_id: int) -> None:
        """Soft delete a type thing."""
        ...

    async def count_all(self) -> int:
        """Return the number of live type things, whatever their state."""
        ...
