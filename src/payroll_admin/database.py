"""Database engine, session factory and dialect helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from payroll_admin.config import Settings, get_settings
from payroll_admin.models import Base

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

# Dialects with INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS: dict[str, Any] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def get_engine(settings: Settings | None = None) -> AsyncEngine:
    """Create async database engine."""
    settings = settings or get_settings()
    options: dict[str, Any] = {"echo": settings.sql_echo, "pool_pre_ping": True}
    if settings.database_url.startswith("postgresql"):
        options.update(pool_size=10, max_overflow=20)
    return create_async_engine(settings.database_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build the session factory shared by all requests."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def dialect_name(session: AsyncSession) -> str:
    """Name of the dialect the session is bound to."""
    return session.get_bind().dialect.name


def upsert_insert(session: AsyncSession, table: Any) -> Any:
    """Dialect-specific INSERT construct supporting ``on_conflict_do_update``.

    Raises NotImplementedError for dialects without an atomic upsert.
    """
    name = dialect_name(session)
    try:
        insert = _UPSERT_INSERTS[name]
    except KeyError:
        raise NotImplementedError(f"Upsert is not supported on dialect '{name}'") from None
    return insert(table)
