"""Async SQLAlchemy engine, session factory and schema bootstrap."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from infrastructure.config import SchemaUpdateMode, Settings, get_logger


logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for ORM models."""


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured datasource."""
    return create_async_engine(
        settings.datasource_url,
        echo=settings.database_echo,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine, mode: SchemaUpdateMode) -> None:
    """
    Bring the schema in line with the configured update mode.
    
    Args:
        engine: Engine to run DDL on
        mode: none leaves the schema alone, update creates missing
            tables, recreate drops and rebuilds every table
    """
    if mode == SchemaUpdateMode.NONE:
        return
    
    async with engine.begin() as conn:
        if mode == SchemaUpdateMode.RECREATE:
            logger.warning("Dropping all tables before recreating schema")
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Database schema ready (mode={mode.value})")


async def close_db(engine: AsyncEngine) -> None:
    """Dispose of the engine's connection pool."""
    await engine.dispose()
