"""Use case for deleting a thing."""

import logging
from uuid import UUID

from geothing.core.errors import NotFoundError, NotOwnerError
from geothing.core.schemas import AuthenticatedUser
from geothing.features.things.repositories.protocols import ThingRepository

logger = logging.getLogger(__name__)


class DeleteThingUseCaseImpl:
    """Implementation of the delete thing use case.

    The row is soft deleted: it stays in the table with its deletion audit
    fields set and disappears from every read.
    """

    def __init__(self, repository: ThingRepository):
        self.repository = repository

    async def execute(self, user: AuthenticatedUser, thing_id: UUID) -> None:
        if not await self.repository.exist(thing_id):
            raise NotFoundError(f"thing {thing_id} does not exist")

        if not await self.repository.is_owner(thing_id, user.user_id):
            logger.warning(
                "delete refused, caller is not the owner",
                extra={"id": str(thing_id), "user_id": user.user_id},
            )
            raise NotOwnerError()

        await self.repository.delete(thing_id, user.user_id)
        logger.info("thing deleted", extra={"id": str(thing_id), "user_id": user.user_id})
