"""Use case for deleting a type thing."""

import logging

from geothing.core.authorization import require_admin
from geothing.core.errors import NotFoundError
from geothing.core.schemas import AuthenticatedUser
from geothing.features.type_things.repositories.protocols import TypeThingRepository

logger = logging.getLogger(__name__)


class DeleteTypeThingUseCaseImpl:
    """Implementation of the delete type thing use case. Admin only."""

    def __init__(self, repository: TypeThingRepository):
        self.repository = repository

    async def execute(self, user: AuthenticatedUser, type_thing_id: int) -> None:
        require_admin(user)
        if not await self.repository.exist(type_thing_id):
            raise NotFoundError(f"type thing {type_thing_id} does not exist")
        await self.repository.delete(type_thing_id, user.user_id)
        logger.info(
            "type thing deleted", extra={"id": type_thing_id, "user_id": user.user_id}
        )
