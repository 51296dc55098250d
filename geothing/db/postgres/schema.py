"""DDL for the thing and type thing tables.

Used by ``scripts/setup_postgres_schema.py`` and by the integration tests.
"""

import asyncpg

EXTENSIONS = (
    "CREATE EXTENSION IF NOT EXISTS postgis;",
    "CREATE EXTENSION IF NOT EXISTS unaccent;",
)

TYPE_THING_TABLE = """
CREATE TABLE IF NOT EXISTS {schema}.type_thing
(
    id                 serial PRIMARY KEY,
    name               text        NOT NULL,
    description        text,
    comment            text,
    external_id        integer,
    table_name         text,
    geometry_type      text,
    inactivated        boolean     NOT NULL DEFAULT false,
    inactivated_time   timestamptz,
    inactivated_by     integer,
    inactivated_reason text,
    managed_by         integer,
    icon_path          text        NOT NULL DEFAULT '',
    more_data_schema   jsonb,
    text_search        tsvector,
    _created_at        timestamptz NOT NULL DEFAULT CURRENT_TIMESTAMP,
    _created_by        integer     NOT NULL,
    _last_modified_at  timestamptz,
    _last_modified_by  integer,
    _deleted           boolean     NOT NULL DEFAULT false,
    _deleted_at        timestamptz,
    _deleted_by        integer
);
"""

THING_TABLE = """
CREATE TABLE IF NOT EXISTS {schema}.thing
(
    id                 uuid PRIMARY KEY,
    type_id            integer     NOT NULL REFERENCES {schema}.type_thing (id),
    name               text        NOT NULL,
    description        text,
    comment            text,
    external_id        integer,
    external_ref       text,
    build_at           timestamptz,
    status             text,
    contained_by       uuid,
    contained_by_old   integer,
    inactivated        boolean     NOT NULL DEFAULT false,
    inactivated_time   timestamptz,
    inactivated_by     integer,
    inactivated_reason text,
    validated          boolean     NOT NULL DEFAULT false,
    validated_time     timestamptz,
    validated_by       integer,
    managed_by         integer,
    more_data          jsonb,
    text_search        tsvector,
    position           geometry(Point, {srid}),
    _created_at        timestamptz NOT NULL DEFAULT CURRENT_TIMESTAMP,
    _created_by        integer     NOT NULL,
    _last_modified_at  timestamptz,
    _last_modified_by  integer,
    _deleted           boolean     NOT NULL DEFAULT false,
    _deleted_at        timestamptz,
    _deleted_by        integer
);
"""

INDEXES = (
    "CREATE INDEX IF NOT EXISTS thing_text_search_idx ON {schema}.thing USING gin (text_search);",
    "CREATE INDEX IF NOT EXISTS thing_position_idx ON {schema}.thing USING gist (position);",
    "CREATE INDEX IF NOT EXISTS thing_created_at_idx ON {schema}.thing (_created_at DESC);",
    "CREATE INDEX IF NOT EXISTS thing_external_id_idx ON {schema}.thing (external_id);",
    "CREATE INDEX IF NOT EXISTS type_thing_text_search_idx ON {schema}.type_thing USING gin (text_search);",
)

SEED_TYPE_THING = """
INSERT INTO {schema}.type_thing (name, description, geometry_type, _created_by, text_search)
SELECT 'Generic thing', 'default type created at setup', 'Point', $1,
       to_tsvector('french', unaccent('Generic thing'))
WHERE NOT EXISTS (SELECT 1 FROM {schema}.type_thing);
"""


async def setup_schema(
    conn: asyncpg.Connection, schema: str, srid: int, seed_user_id: int | None = None
) -> None:
    """Create extensions, schema, tables and indexes if they are missing.

    When ``seed_user_id`` is given and the type thing table is empty, a first
    type thing owned by that user is inserted.
    """
    for statement in EXTENSIONS:
        await conn.execute(statement)
    await conn.execute(f"CREATE SCHEMA IF NOT EXISTS {schema};")
    await conn.execute(TYPE_THING_TABLE.format(schema=schema))
    await conn.execute(THING_TABLE.format(schema=schema, srid=srid))
    for statement in INDEXES:
        await conn.execute(statement.format(schema=schema))
    if seed_user_id is not None:
        await conn.execute(SEED_TYPE_THING.format(schema=schema), seed_user_id)


async def truncate_tables(conn: asyncpg.Connection, schema: str) -> None:
    """Remove every row from the thing tables and restart the type thing ids."""
    await conn.execute(
        f"TRUNCATE TABLE {schema}.thing, {schema}.type_thing RESTART IDENTITY CASCADE;"
    )
