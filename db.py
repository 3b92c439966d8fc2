# db.py
from __future__ import annotations
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()

_engine: Optional[AsyncEngine] = None
_sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None


def _engine_kwargs(db_url: str) -> dict:
    if db_url.startswith("sqlite") and ":memory:" in db_url:
        # one shared connection, otherwise every session sees its own empty database
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {}


async def init_db(db_url: str) -> AsyncEngine:
    """Create the engine and session factory, and create missing tables."""
    global _engine, _sessionmaker
    import models  # noqa: F401  (registers the tables on Base.metadata)

    _engine = create_async_engine(db_url, **_engine_kwargs(db_url))
    _sessionmaker = async_sessionmaker(_engine, expire_on_commit=False, autoflush=False)
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return _engine


async def close_db() -> None:
    global _engine, _sessionmaker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _sessionmaker = None


def session_factory() -> async_sessionmaker[AsyncSession]:
    if _sessionmaker is None:
        raise RuntimeError("Database is not initialised; call init_db() first")
    return _sessionmaker


async def get_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency: one session per request, rolled back on error."""
    async with session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
