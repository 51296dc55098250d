"""Use case for updating a thing."""

import logging
from uuid import UUID

from geothing.core.errors import NotFoundError, NotOwnerError, TypeThingNotFoundError
from geothing.core.schemas import AuthenticatedUser
from geothing.features.crud.validation import MIN_NAME_LENGTH, validate_name
from geothing.features.things.dtos import ThingRequest
from geothing.features.things.models import Thing
from geothing.features.things.repositories.protocols import ThingRepository

logger = logging.getLogger(__name__)


class UpdateThingUseCaseImpl:
    """Implementation of the update thing use case."""

    def __init__(self, repository: ThingRepository, min_name_length: int = MIN_NAME_LENGTH):
        """Initialize the use case with dependencies.

        Args:
            repository: Repository for thing storage
            min_name_length: Minimum length of a trimmed thing name
        """
        self.repository = repository
        self.min_name_length = min_name_length

    async def execute(
        self, user: AuthenticatedUser, thing_id: UUID, thing: ThingRequest
    ) -> Thing:
        """Overwrite a thing owned by the calling user.

        Existence is checked before ownership, so a missing thing is reported
        as not found whoever the caller is.

        Args:
            user: The authenticated caller, recorded as last modifier
            thing_id: Id of the thing to update, the id of the body is ignored
            thing: New content of the thing

        Returns:
            The thing as stored after the update

        Raises:
            NotFoundError: If no live thing has this id
            NotOwnerError: If the caller did not create the thing
            InvalidInputError: If the name breaks the naming rule
            TypeThingNotFoundError: If type_id does not reference a type thing
        """
        if not await self.repository.exist(thing_id):
            raise NotFoundError(f"thing {thing_id} does not exist")

        if not await self.repository.is_owner(thing_id, user.user_id):
            logger.warning(
                "update refused, caller is not the owner",
                extra={"id": str(thing_id), "user_id": user.user_id},
            )
            raise NotOwnerError()

        validate_name(thing.name, self.min_name_length)

        if not await self.repository.type_thing_exists(thing.type_id):
            raise TypeThingNotFoundError(f"type thing {thing.type_id} does not exist")

        return await self.repository.update(thing_id, user.user_id, thing)
