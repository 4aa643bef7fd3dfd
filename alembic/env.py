from __future__ import annotations

import asyncio

from sqlalchemy.engine import Connection

from alembic import context
from app.comparisons import models as _comparison_models  # noqa: F401
from app.core.db import Base, create_engine
from app.core.settings import get_settings

config = context.config
target_metadata = Base.metadata


def _database_url() -> str:
    url = get_settings().sqlalchemy_database_url
    if not url:
        raise RuntimeError("Database is not configured (set DATABASE_URL or DB_SERVER/DB_NAME)")
    return url


def run_migrations_offline() -> None:
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_engine(database_url=_database_url())
    async with engine.connect() as connection:
        await connection.run_sync(_run_sync_migrations)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
