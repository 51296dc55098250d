"""PostgreSQL implementation of the type thing repository."""

from __future__ import annotations

import logging

from geothing.core.errors import StorageError
from geothing.db.postgres.connection import Database
from geothing.features.crud.postgres_repository import PostgresCrudRepository
from geothing.features.type_things import sql
from geothing.features.type_things.dtos import TypeThingRequest
from geothing.features.type_things.models import (
    TypeThing,
    TypeThingCountParams,
    TypeThingList,
    TypeThingListParams,
)

logger = logging.getLogger(__name__)


class PostgresTypeThingRepository(PostgresCrudRepository[int, TypeThing, TypeThingList]):
    """Type thing storage on PostgreSQL."""

    item_model = TypeThing
    list_item_model = TypeThingList

    def __init__(self, db: Database, schema: str):
        super().__init__(db, sql.type_thing_descriptor(schema))
        self.schema = schema

    async def list(
        self, offset: int, limit: int, params: TypeThingListParams
    ) -> list[TypeThingList]:
        return await super().list(offset, limit, params)

    async def count(self, params: TypeThingCountParams) -> int:
        return await super().count(params)

    async def create(self, user_id: int, type_thing: TypeThingRequest) -> TypeThing:
        new_id = await self.db.fetchval(
            sql.insert_type_thing_sql(self.schema),
            type_thing.name,
            type_thing.description,
            type_thing.comment,
            type_thing.external_id,
            type_thing.table_name,
            type_thing.geometry_type,
            type_thing.inactivated,
            type_thing.inactivated_time,
            type_thing.inactivated_by,
            type_thing.inactivated_reason,
            type_thing.managed_by,
            type_thing.icon_path,
            type_thing.more_data_schema,
            user_id,
        )
        if new_id is None:
            logger.error("type thing insert returned no id", extra={"user_id": user_id})
            raise StorageError("type thing was not created")
        return await self._get_after_write("created", new_id)

    async def update(
        self, type_thing_id: int, user_id: int, type_thing: TypeThingRequest
    ) -> TypeThing:
        await self._execute_write(
            "update",
            type_thing_id,
            sql.update_type_thing_sql(self.schema),
            type_thing_id,
            type_thing.name,
            type_thing.description,
            type_thing.comment,
            type_thing.external_id,
            type_thing.table_name,
            type_thing.geometry_type,
            type_thing.inactivated,
            type_thing.inactivated_time,
            type_thing.inactivated_by,
            type_thing.inactivated_reason,
            type_thing.managed_by,
            type_thing.icon_path,
            type_thing.more_data_schema,
            user_id,
        )
        return await self._get_after_write("updated", type_thing_id)

    async def count_all(self) -> int:
        return await self.db.get_query_int(sql.count_all_sql(self.schema))
