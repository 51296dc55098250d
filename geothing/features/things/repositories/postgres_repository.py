"""PostgreSQL implementation of the thing repository."""

from __future__ import annotations

import logging
from uuid import UUID

import asyncpg

from geothing.core.errors import AlreadyExistsError, StorageError
from geothing.db.postgres.connection import Database
from geothing.features.crud.postgres_repository import PostgresCrudRepository
from geothing.features.things import sql
from geothing.features.things.dtos import ThingRequest
from geothing.features.things.models import (
    CountParams,
    GeoJsonParams,
    ListParams,
    SearchParams,
    Thing,
    ThingList,
)

logger = logging.getLogger(__name__)


class PostgresThingRepository(PostgresCrudRepository[UUID, Thing, ThingList]):
    """Thing storage on a PostGIS enabled PostgreSQL database."""

    item_model = Thing
    list_item_model = ThingList

    def __init__(self, db: Database, schema: str, srid: int):
        super().__init__(db, sql.thing_descriptor(schema))
        self.schema = schema
        self.srid = srid

    async def list(self, offset: int, limit: int, params: ListParams) -> list[ThingList]:
        return await super().list(offset, limit, params)

    async def list_by_external_id(
        self, offset: int, limit: int, external_id: int
    ) -> list[ThingList]:
        return await self.list_by_column("external_id", external_id, offset, limit)

    async def search(
        self, offset: int, limit: int, params: SearchParams
    ) -> list[ThingList]:
        # Search shares the list shape, the keyword predicate comes from params.
        return await super().list(offset, limit, params)

    async def count(self, params: CountParams) -> int:
        return await super().count(params)

    async def geojson(self, offset: int, limit: int, params: GeoJsonParams) -> str:
        return await super().geojson(offset, limit, params)

    async def create(self, user_id: int, thing: ThingRequest) -> Thing:
        logger.debug("creating thing", extra={"id": str(thing.id), "user_id": user_id})
        try:
            await self._insert(user_id, thing)
        except StorageError as e:
            # A soft deleted row still holds its primary key.
            if isinstance(e.__cause__, asyncpg.UniqueViolationError):
                raise AlreadyExistsError(f"thing {thing.id} already exists") from e
            raise
        return await self._get_after_write("created", thing.id)

    async def _insert(self, user_id: int, thing: ThingRequest) -> None:
        await self._execute_write(
            "create",
            thing.id,
            sql.insert_thing_sql(self.schema, self.srid),
            thing.id,
            thing.type_id,
            thing.name,
            thing.description,
            thing.comment,
            thing.external_id,
            thing.external_ref,
            thing.build_at,
            thing.status,
            thing.contained_by,
            thing.contained_by_old,
            thing.validated,
            thing.validated_time,
            thing.validated_by,
            thing.managed_by,
            user_id,
            thing.more_data,
            thing.pos_x,
            thing.pos_y,
        )

    async def update(self, thing_id: UUID, user_id: int, thing: ThingRequest) -> Thing:
        logger.debug("updating thing", extra={"id": str(thing_id), "user_id": user_id})
        await self._execute_write(
            "update",
            thing_id,
            sql.update_thing_sql(self.schema, self.srid),
            thing_id,
            thing.type_id,
            thing.name,
            thing.description,
            thing.comment,
            thing.external_id,
            thing.external_ref,
            thing.build_at,
            thing.status,
            thing.contained_by,
            thing.contained_by_old,
            thing.inactivated,
            thing.inactivated_time,
            thing.inactivated_by,
            thing.inactivated_reason,
            thing.validated,
            thing.validated_time,
            thing.validated_by,
            thing.managed_by,
            user_id,
            thing.more_data,
            thing.pos_x,
            thing.pos_y,
        )
        return await self._get_after_write("updated", thing_id)

    async def type_thing_exists(self, type_id: int) -> bool:
        count = await self.db.get_query_int(sql.type_thing_exists_sql(self.schema), type_id)
        return count > 0
