"""Use cases for listing and counting type things, open to every caller."""

from geothing.core.errors import NoRowsError
from geothing.features.type_things.models import (
    TypeThingCountParams,
    TypeThingList,
    TypeThingListParams,
)
from geothing.features.type_things.repositories.protocols import TypeThingRepository


class ListTypeThingsUseCaseImpl:
    def __init__(self, repository: TypeThingRepository):
        self.repository = repository

    async def execute(
        self, offset: int, limit: int, params: TypeThingListParams
    ) -> list[TypeThingList]:
        try:
            return await self.repository.list(offset, limit, params)
        except NoRowsError:
            return []


class CountTypeThingsUseCaseImpl:
    def __init__(self, repository: TypeThingRepository):
        self.repository = repository

    async def execute(self, params: TypeThingCountParams) -> int:
        return await self.repository.count(params)
