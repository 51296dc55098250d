"""SQL composition shared by every entity.

Each optional filter compiles to ``column = COALESCE($n, column)`` and binds
either its value or NULL, so an absent filter degrades to an always true
predicate without changing the SQL text. Nullable columns use
``IS NOT DISTINCT FROM`` instead, ``NULL = NULL`` would drop the row. Only
the keyword predicate is appended on presence, a NULL query would match
nothing.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from geothing.features.crud.filters import ABSENT, Opt


class ComposedQuery(NamedTuple):
    """SQL text and its positional arguments."""

    sql: str
    args: list[Any]


@dataclass(frozen=True)
class EntityDescriptor:
    """What the composer needs to know about one table."""

    name: str
    table: str
    list_columns: str
    get_columns: str
    base_condition: str = "_deleted = false"
    filter_columns: Mapping[str, str] = field(default_factory=dict)
    nullable_filter_columns: frozenset[str] = frozenset()
    order_by: str = "_created_at DESC"
    id_column: str = "id"
    owner_column: str = "_created_by"
    text_search_column: str = "text_search"
    text_search_config: str = "french"
    geometry_column: str | None = None
    geojson_properties: str | None = None


def _placeholder(index: int) -> str:
    return f"${index}"


def filter_predicates(
    descriptor: EntityDescriptor, filters: Any, first_index: int
) -> ComposedQuery:
    """Build the AND predicates for a filter object, numbering from ``first_index``.

    ``filters`` exposes an ``Opt`` attribute for the keys of
    ``descriptor.filter_columns`` it supports and may expose ``keywords``.
    Keys it does not declare produce no predicate.
    """
    sql_parts: list[str] = []
    args: list[Any] = []
    index = first_index
    for attribute, column in descriptor.filter_columns.items():
        if not hasattr(filters, attribute):
            continue
        value: Opt = getattr(filters, attribute)
        if column in descriptor.nullable_filter_columns:
            operator = "IS NOT DISTINCT FROM"
        else:
            operator = "="
        sql_parts.append(
            f" AND {column} {operator} COALESCE({_placeholder(index)}, {column})"
        )
        args.append(value.to_param())
        index += 1

    keywords: Opt = getattr(filters, "keywords", ABSENT)
    if keywords.present:
        sql_parts.append(
            f" AND {descriptor.text_search_column} @@ plainto_tsquery("
            f"'{descriptor.text_search_config}', unaccent({_placeholder(index)}))"
        )
        args.append(keywords.value)

    return ComposedQuery("".join(sql_parts), args)


def _page_clause(descriptor: EntityDescriptor) -> str:
    return f" ORDER BY {descriptor.order_by} LIMIT $1 OFFSET $2"


def list_query(
    descriptor: EntityDescriptor, filters: Any, offset: int, limit: int
) -> ComposedQuery:
    """Paginated list view rows matching the filters."""
    predicates = filter_predicates(descriptor, filters, first_index=3)
    sql = (
        f"SELECT {descriptor.list_columns} FROM {descriptor.table}"
        f" WHERE {descriptor.base_condition}{predicates.sql}"
        f"{_page_clause(descriptor)};"
    )
    return ComposedQuery(sql, [limit, offset, *predicates.args])


def list_by_column_query(
    descriptor: EntityDescriptor, column: str, value: Any, offset: int, limit: int
) -> ComposedQuery:
    """Paginated list view rows having ``column = value``."""
    sql = (
        f"SELECT {descriptor.list_columns} FROM {descriptor.table}"
        f" WHERE {descriptor.base_condition} AND {column} = $3"
        f"{_page_clause(descriptor)};"
    )
    return ComposedQuery(sql, [limit, offset, value])


def count_query(descriptor: EntityDescriptor, filters: Any) -> ComposedQuery:
    """Number of rows matching the filters."""
    predicates = filter_predicates(descriptor, filters, first_index=1)
    sql = (
        f"SELECT COUNT(*) FROM {descriptor.table}"
        f" WHERE {descriptor.base_condition}{predicates.sql};"
    )
    return ComposedQuery(sql, predicates.args)


def geojson_query(
    descriptor: EntityDescriptor, filters: Any, offset: int, limit: int
) -> ComposedQuery:
    """One FeatureCollection text aggregating the paginated matching rows."""
    if descriptor.geometry_column is None or descriptor.geojson_properties is None:
        raise ValueError(f"{descriptor.name} has no geometry to project")
    predicates = filter_predicates(descriptor, filters, first_index=3)
    sql = f"""
SELECT row_to_json(fc)::text
FROM (SELECT 'FeatureCollection' AS type,
             coalesce(array_to_json(array_agg(f)), '[]') AS features
      FROM (SELECT 'Feature' AS type,
                   ST_AsGeoJSON(t.{descriptor.geometry_column}, 6)::json AS geometry,
                   row_to_json((SELECT l FROM (SELECT {descriptor.geojson_properties}) AS l)) AS properties
            FROM {descriptor.table} t
            WHERE {descriptor.base_condition}{predicates.sql}
            {_page_clause(descriptor)}) AS f) AS fc;
"""
    return ComposedQuery(sql, [limit, offset, *predicates.args])


def get_query(descriptor: EntityDescriptor) -> str:
    """Full row by primary key, invisible once soft deleted."""
    return (
        f"SELECT {descriptor.get_columns} FROM {descriptor.table}"
        f" WHERE {descriptor.id_column} = $1 AND _deleted = false;"
    )


def exist_query(descriptor: EntityDescriptor) -> str:
    return (
        f"SELECT COUNT(*) FROM {descriptor.table}"
        f" WHERE {descriptor.id_column} = $1 AND _deleted = false;"
    )


def is_owner_query(descriptor: EntityDescriptor) -> str:
    return (
        f"SELECT COUNT(*) FROM {descriptor.table}"
        f" WHERE {descriptor.id_column} = $1 AND {descriptor.owner_column} = $2"
        " AND _deleted = false;"
    )


def soft_delete_query(descriptor: EntityDescriptor) -> str:
    """Mark a row deleted by $1; the row itself is kept."""
    return (
        f"UPDATE {descriptor.table}"
        " SET _deleted = true, _deleted_by = $1, _deleted_at = CURRENT_TIMESTAMP"
        f" WHERE {descriptor.id_column} = $2 AND _deleted = false;"
    )
