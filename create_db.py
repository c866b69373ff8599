#!/usr/bin/env python3
# create_db.py
"""
Creates the service database on the configured PostgreSQL server if it is missing.
Tables are created by the service itself on startup (migrations/init.sql).
"""

import asyncio

import asyncpg

from src.config import settings


async def create_db() -> None:
    db_name = settings.database.DB_NAME

    # Connect to the default database to issue CREATE DATABASE
    sys_conn = await asyncpg.connect(
        user=settings.database.DB_USER,
        password=settings.database.DB_PASSWORD,
        host=settings.database.DB_HOST,
        port=settings.database.DB_PORT,
        database="postgres",
    )
    try:
        exists = await sys_conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", db_name)
        if exists:
            print(f"Database {db_name} already exists.")
            return

        print(f"Creating database {db_name}...")
        # Identifiers cannot be bound as parameters
        await sys_conn.execute(f'CREATE DATABASE "{db_name}"')
        print("Database created.")
    finally:
        await sys_conn.close()


if __name__ == "__main__":
    asyncio.run(create_db())
