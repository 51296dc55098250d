"""Use case for retrieving a thing by id."""

from uuid import UUID

from geothing.core.errors import NoRowsError, NotFoundError
from geothing.features.things.models import Thing
from geothing.features.things.repositories.protocols import ThingRepository


class GetThingUseCaseImpl:
    """Implementation of the get thing use case."""

    def __init__(self, repository: ThingRepository):
        self.repository = repository

    async def execute(self, thing_id: UUID) -> Thing:
        """Return the thing, or raise NotFoundError if it is missing or deleted."""
        if not await self.repository.exist(thing_id):
            raise NotFoundError(f"thing {thing_id} does not exist")
        try:
            return await self.repository.get(thing_id)
        except NoRowsError as e:
            # Deleted between the existence check and the read.
            raise NotFoundError(f"thing {thing_id} does not exist") from e
