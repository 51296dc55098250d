"""Use case for counting things."""

from geothing.features.things.models import CountParams
from geothing.features.things.repositories.protocols import ThingRepository


class CountThingsUseCaseImpl:
    """Count the things matching the optional filters and keywords."""

    def __init__(self, repository: ThingRepository):
        self.repository = repository

    async def execute(self, params: CountParams) -> int:
        return await self.repository.count(params)
