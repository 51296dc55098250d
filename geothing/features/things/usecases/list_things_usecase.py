"""Use cases for the list shaped thing queries."""

from geothing.core.errors import NoRowsError
from geothing.features.things.models import ListParams, SearchParams, ThingList
from geothing.features.things.repositories.protocols import ThingRepository


class ListThingsUseCaseImpl:
    """List things; an empty page is a normal result, never an error."""

    def __init__(self, repository: ThingRepository):
        self.repository = repository

    async def execute(self, offset: int, limit: int, params: ListParams) -> list[ThingList]:
        try:
            return await self.repository.list(offset, limit, params)
        except NoRowsError:
            return []


class ListThingsByExternalIdUseCaseImpl:
    """List the things sharing one external id."""

    def __init__(self, repository: ThingRepository):
        self.repository = repository

    async def execute(self, offset: int, limit: int, external_id: int) -> list[ThingList]:
        try:
            return await self.repository.list_by_external_id(offset, limit, external_id)
        except NoRowsError:
            return []


class SearchThingsUseCaseImpl:
    """Full text search over name, description and comment of things."""

    def __init__(self, repository: ThingRepository):
        self.repository = repository

    async def execute(
        self, offset: int, limit: int, params: SearchParams
    ) -> list[ThingList]:
        try:
            return await self.repository.search(offset, limit, params)
        except NoRowsError:
            return []
