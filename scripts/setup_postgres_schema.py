"""Script to set up the PostgreSQL schema.

This script connects to the PostgreSQL server configured in the environment,
creates the postgis and unaccent extensions, the schema, the thing and type
thing tables with their indexes, and inserts a first type thing owned by the
admin account when the table is empty.

Usage:
    python -m scripts.setup_postgres_schema [--reset]
"""

import argparse
import asyncio
import logging

import asyncpg

from geothing.core.logging import configure_logging
from geothing.core.settings import get_settings
from geothing.db.postgres.schema import setup_schema

logger = logging.getLogger(__name__)


async def run(reset: bool) -> None:
    """Create the schema, dropping it first when ``reset`` is set."""
    settings = get_settings()
    logger.info(
        "connecting to database %s on %s", settings.database_name, settings.postgres_host
    )
    conn = await asyncpg.connect(
        user=settings.postgres_user,
        password=settings.postgres_password,
        host=settings.postgres_host,
        port=settings.postgres_port,
        database=settings.database_name,
    )
    try:
        async with conn.transaction():
            if reset:
                logger.warning("dropping schema %s", settings.db_schema)
                await conn.execute(f"DROP SCHEMA IF EXISTS {settings.db_schema} CASCADE;")
            await setup_schema(
                conn,
                schema=settings.db_schema,
                srid=settings.db_srid,
                seed_user_id=settings.admin_id,
            )
        logger.info("schema %s is ready", settings.db_schema)
    finally:
        await conn.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Set up the geothing PostgreSQL schema")
    parser.add_argument(
        "--reset", action="store_true", help="drop the schema before creating it"
    )
    args = parser.parse_args()
    configure_logging(get_settings().log_level)
    asyncio.run(run(args.reset))


if __name__ == "__main__":
    main()
