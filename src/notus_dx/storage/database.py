"""Database connection and session management."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from notus_dx.storage.models import Base


def normalize_url(database_url: str) -> str:
    """Convert sqlite:/// to sqlite+aiosqlite:/// if needed."""
    if database_url.startswith("sqlite:///") and "aiosqlite" not in database_url:
        return database_url.replace("sqlite:///", "sqlite+aiosqlite:///")
    return database_url


class Database:
    """Owns one async engine and its session factory.

    Created by the application lifespan and handed to whatever needs it,
    so tests can use an in-memory database without touching globals.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.url = normalize_url(database_url)
        self._engine: AsyncEngine = create_async_engine(self.url, echo=echo, future=True)
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a database session context manager."""
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def init(self) -> None:
        """Create all tables."""
        url = make_url(self.url)
        if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Close database connections."""
        await self._engine.dispose()
