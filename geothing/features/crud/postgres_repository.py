"""Generic asyncpg repository driven by an EntityDescriptor."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, TypeVar

import asyncpg
from pydantic import BaseModel

from geothing.core.errors import NoRowsError, StorageError
from geothing.db.postgres.connection import Database
from geothing.features.crud import query as q
from geothing.features.crud.query import ComposedQuery, EntityDescriptor

logger = logging.getLogger(__name__)

IdT = TypeVar("IdT")
ItemT = TypeVar("ItemT", bound=BaseModel)
ListItemT = TypeVar("ListItemT", bound=BaseModel)


class PostgresCrudRepository(Generic[IdT, ItemT, ListItemT]):
    """Shared read, ownership and soft delete operations.

    Subclasses set ``item_model`` and ``list_item_model`` and provide the
    entity specific insert and update statements.
    """

    item_model: ClassVar[type[BaseModel]]
    list_item_model: ClassVar[type[BaseModel]]

    db: Database
    descriptor: EntityDescriptor

    def __init__(self, db: Database, descriptor: EntityDescriptor):
        self.db = db
        self.descriptor = descriptor

    def _to_item(self, record: asyncpg.Record) -> ItemT:
        return self.item_model.model_validate(dict(record))  # type: ignore[return-value]

    def _to_list_item(self, record: asyncpg.Record) -> ListItemT:
        return self.list_item_model.model_validate(dict(record))  # type: ignore[return-value]

    async def _fetch_list(self, operation: str, query: ComposedQuery) -> list[ListItemT]:
        records = await self.db.fetch(query.sql, *query.args)
        if not records:
            logger.info("%s %s returned no results", self.descriptor.name, operation)
            raise NoRowsError()
        return [self._to_list_item(record) for record in records]

    async def list(self, offset: int, limit: int, filters: Any) -> list[ListItemT]:
        """Return a page of list view rows matching the filters."""
        logger.debug(
            "entering %s list", self.descriptor.name,
            extra={"offset": offset, "limit": limit},
        )
        return await self._fetch_list(
            "list", q.list_query(self.descriptor, filters, offset, limit)
        )

    async def list_by_column(
        self, column: str, value: Any, offset: int, limit: int
    ) -> list[ListItemT]:
        return await self._fetch_list(
            f"list by {column}",
            q.list_by_column_query(self.descriptor, column, value, offset, limit),
        )

    async def count(self, filters: Any) -> int:
        query = q.count_query(self.descriptor, filters)
        return await self.db.get_query_int(query.sql, *query.args)

    async def geojson(self, offset: int, limit: int, filters: Any) -> str:
        """Return a FeatureCollection of the matching rows as JSON text."""
        query = q.geojson_query(self.descriptor, filters, offset, limit)
        result = await self.db.fetchval(query.sql, *query.args)
        if result is None:
            logger.info("%s geojson returned no results", self.descriptor.name)
            raise NoRowsError()
        return result

    async def get(self, item_id: IdT) -> ItemT:
        record = await self.db.fetchrow(q.get_query(self.descriptor), item_id)
        if record is None:
            logger.info("%s get returned no results", self.descriptor.name,
                        extra={"id": str(item_id)})
            raise NoRowsError()
        return self._to_item(record)

    async def exist(self, item_id: IdT) -> bool:
        """True only if a row with this id exists and is not soft deleted."""
        count = await self.db.get_query_int(q.exist_query(self.descriptor), item_id)
        return count > 0

    async def is_owner(self, item_id: IdT, user_id: int) -> bool:
        """True only if user_id created the row with this id."""
        count = await self.db.get_query_int(
            q.is_owner_query(self.descriptor), item_id, user_id
        )
        return count > 0

    async def delete(self, item_id: IdT, user_id: int) -> None:
        """Soft delete the row. No row affected is a storage failure."""
        affected = await self.db.exec_action_query(
            q.soft_delete_query(self.descriptor), user_id, item_id
        )
        if affected < 1:
            logger.error("%s was not marked for deletion", self.descriptor.name,
                         extra={"id": str(item_id)})
            raise StorageError(f"{self.descriptor.name} was not marked for deletion")

    async def _execute_write(self, operation: str, item_id: Any, sql: str, *args: Any) -> None:
        affected = await self.db.exec_action_query(sql, *args)
        if affected < 1:
            logger.error("%s %s affected no row", self.descriptor.name, operation,
                         extra={"id": str(item_id)})
            raise StorageError(f"{self.descriptor.name} {operation} affected no row")

    async def _get_after_write(self, operation: str, item_id: IdT) -> ItemT:
        """Read back a freshly written row so server computed fields are returned."""
        try:
            return await self.get(item_id)
        except NoRowsError as e:
            raise StorageError(
                f"{self.descriptor.name} was {operation}, but can not be retrieved"
            ) from e
