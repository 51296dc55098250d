"""Use case for creating a thing."""

import logging

from geothing.core.errors import AlreadyExistsError, TypeThingNotFoundError
from geothing.core.schemas import AuthenticatedUser
from geothing.features.crud.validation import MIN_NAME_LENGTH, validate_name
from geothing.features.things.dtos import ThingRequest
from geothing.features.things.models import Thing
from geothing.features.things.repositories.protocols import ThingRepository

logger = logging.getLogger(__name__)


class CreateThingUseCaseImpl:
    """Implementation of the create thing use case."""

    def __init__(self, repository: ThingRepository, min_name_length: int = MIN_NAME_LENGTH):
        """Initialize the use case with dependencies.

        Args:
            repository: Repository for thing storage
            min_name_length: Minimum length of a trimmed thing name
        """
        self.repository = repository
        self.min_name_length = min_name_length

    async def execute(self, user: AuthenticatedUser, thing: ThingRequest) -> Thing:
        """Create a thing owned by the calling user.

        Args:
            user: The authenticated caller, recorded as creator
            thing: The thing to store

        Returns:
            The thing as stored, with its server set audit fields

        Raises:
            InvalidInputError: If the name breaks the naming rule
            TypeThingNotFoundError: If type_id does not reference a type thing
            AlreadyExistsError: If a thing with this id already exists
        """
        validate_name(thing.name, self.min_name_length)

        if not await self.repository.type_thing_exists(thing.type_id):
            raise TypeThingNotFoundError(f"type thing {thing.type_id} does not exist")

        if await self.repository.exist(thing.id):
            raise AlreadyExistsError(f"thing {thing.id} already exists")

        created = await self.repository.create(user.user_id, thing)
        logger.info(
            "thing created", extra={"id": str(created.id), "user_id": user.user_id}
        )
        return created
