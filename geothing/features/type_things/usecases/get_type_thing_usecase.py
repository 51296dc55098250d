"""Use case for retrieving a type thing by id."""

from geothing.core.authorization import require_admin
from geothing.core.errors import NoRowsError, NotFoundError
from geothing.core.schemas import AuthenticatedUser
from geothing.features.type_things.models import TypeThing
from geothing.features.type_things.repositories.protocols import TypeThingRepository


class GetTypeThingUseCaseImpl:
    """Implementation of the get type thing use case. Admin only."""

    def __init__(self, repository: TypeThingRepository):
        self.repository = repository

    async def execute(self, user: AuthenticatedUser, type_thing_id: int) -> TypeThing:
        require_admin(user)
        if not await self.repository.exist(type_thing_id):
            raise NotFoundError(f"type thing {type_thing_id} does not exist")
        try:
            return await self.repository.get(type_thing_id)
        except NoRowsError as e:
            raise NotFoundError(f"type thing {type_thing_id} does not exist") from e
