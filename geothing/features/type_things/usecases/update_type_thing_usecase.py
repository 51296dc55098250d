"""Use case for updating a type thing."""

from geothing.core.authorization import require_admin
from geothing.core.errors import NotFoundError
from geothing.core.schemas import AuthenticatedUser
from geothing.features.crud.validation import MIN_NAME_LENGTH, validate_name
from geothing.features.type_things.dtos import TypeThingRequest
from geothing.features.type_things.models import TypeThing
from geothing.features.type_things.repositories.protocols import TypeThingRepository


class UpdateTypeThingUseCaseImpl:
    """Implementation of the update type thing use case. Admin only."""

    def __init__(
        self, repository: TypeThingRepository, min_name_length: int = MIN_NAME_LENGTH
    ):
        self.repository = repository
        self.min_name_length = min_name_length

    async def execute(
        self, user: AuthenticatedUser, type_thing_id: int, type_thing: TypeThingRequest
    ) -> TypeThing:
        require_admin(user)
        if not await self.repository.exist(type_thing_id):
            raise NotFoundError(f"type thing {type_thing_id} does not exist")
        validate_name(type_thing.name, self.min_name_length)
        return await self.repository.update(type_thing_id, user.user_id, type_thing)
