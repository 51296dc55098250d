"""Use case for creating a type thing."""

import logging

from geothing.core.authorization import require_admin
from geothing.core.schemas import AuthenticatedUser
from geothing.features.crud.validation import MIN_NAME_LENGTH, validate_name
from geothing.features.type_things.dtos import TypeThingRequest
from geothing.features.type_things.models import TypeThing
from geothing.features.type_things.repositories.protocols import TypeThingRepository

logger = logging.getLogger(__name__)


class CreateTypeThingUseCaseImpl:
    """Implementation of the create type thing use case."""

    def __init__(
        self, repository: TypeThingRepository, min_name_length: int = MIN_NAME_LENGTH
    ):
        self.repository = repository
        self.min_name_length = min_name_length

    async def execute(
        self, user: AuthenticatedUser, type_thing: TypeThingRequest
    ) -> TypeThing:
        """Create a type thing.

        Raises:
            AdminRequiredError: If the caller is not an admin, before any write
            InvalidInputError: If the name breaks the naming rule
        """
        require_admin(user)
        validate_name(type_thing.name, self.min_name_length)
        created = await self.repository.create(user.user_id, type_thing)
        logger.info(
            "type thing created", extra={"id": created.id, "user_id": user.user_id}
        )
        return created
