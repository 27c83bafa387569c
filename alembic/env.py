import asyncio
import sys
from pathlib import Path
import os

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from logging.config import fileConfig
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from alembic import context
from dotenv import load_dotenv

from lightbnb.config import Settings
from lightbnb.models import Base

# Pick up DATABASE_URL from .env in development
load_dotenv()

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

if not os.environ.get("DATABASE_URL"):
    raise RuntimeError("DATABASE_URL not set. Export it (or add in .env).")

# Fresh Settings so the exported URL is normalised to asyncpg
db_url = Settings().DATABASE_URL


def run_migrations_offline():
    """Run migrations in 'offline' mode.

    Emits the DDL as SQL script output without connecting.
    """
    context.configure(
        url=db_url,
        target_metadata=Base.metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=Base.metadata,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online():
    """Run migrations in 'online' mode over the asyncpg driver.

    Uses a throwaway engine without pooling; the application pool is not involved.
    """
    connectable = create_async_engine(db_url, poolclass=NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
