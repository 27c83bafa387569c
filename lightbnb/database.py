import ssl
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession
from sqlalchemy.orm import sessionmaker
from structlog import get_logger

from lightbnb.config import settings

logger = get_logger()

# Process-wide pool, built once on startup and disposed on shutdown
engine: Optional[AsyncEngine] = None
AsyncSessionFactory: Optional[sessionmaker] = None


def _connect_args() -> dict:
    if not settings.DB_REQUIRE_SSL:
        return {}
    # asyncpg takes an SSLContext rather than libpq's sslmode
    ssl_ctx = ssl.create_default_context()
    return {"ssl": ssl_ctx}


def init_engine(url: Optional[str] = None) -> AsyncEngine:
    """
    Creates the shared async engine and session factory.

    Safe to call more than once; later calls return the engine built by the first.
    """
    global engine, AsyncSessionFactory
    if engine is not None:
        return engine

    db_url = url or settings.DATABASE_URL
    if not db_url:
        raise RuntimeError("DATABASE_URL not set")

    engine = create_async_engine(
        db_url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
        echo=settings.DB_ECHO,
        connect_args=_connect_args(),
    )
    AsyncSessionFactory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    logger.info(
        "Database engine initialized",
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )
    return engine


async def close_engine() -> None:
    """Closes every pooled connection. No-op when the engine was never created."""
    global engine, AsyncSessionFactory
    if engine is None:
        return
    await engine.dispose()
    engine = None
    AsyncSessionFactory = None
    logger.info("Database engine disposed")


# Dependency for getting a session in FastAPI routes
async def get_session() -> AsyncIterator[AsyncSession]:
    if AsyncSessionFactory is None:
        raise RuntimeError("Database engine not initialized. Call init_engine() first.")
    async with AsyncSessionFactory() as session:
        yield session
