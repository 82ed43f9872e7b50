"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: keeps one engine per running event loop
2. Base: declarative base shared by every ORM model
3. Database: session factory injected into repositories through the DI container
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from drivent.platform.config.core_setting import settings
from drivent.platform.logging.loguru_io import Logger


class AsyncEngineManager:
    """
    Manages the SQLAlchemy async engine with event loop awareness.

    Engines are bound to the loop that created their connections. A new loop
    (uvicorn reload, each TestClient context) gets a fresh engine to avoid
    "Task got Future attached to a different loop" errors.
    """

    def __init__(self) -> None:
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            if self._engine is None:
                self._engine = self._create_engine()
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, dropping old engine...')
                self._session_maker = None

            Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
            self._engine = self._create_engine()
            self._loop = current_loop

        return self._engine  # type: ignore[return-value]

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._loop = None
        self._session_maker = None

    @staticmethod
    def _create_engine() -> AsyncEngine:
        url = settings.DATABASE_URL_ASYNC
        kwargs: dict[str, Any] = {'echo': False}
        if url.startswith('sqlite'):
            engine = create_async_engine(url, **kwargs)
            _enable_sqlite_foreign_keys(engine)
            return engine

        kwargs |= {
            'pool_size': settings.DB_POOL_SIZE,
            'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
            'pool_timeout': settings.DB_POOL_TIMEOUT,
            'pool_recycle': settings.DB_POOL_RECYCLE,
            'pool_pre_ping': settings.DB_POOL_PRE_PING,
        }
        return create_async_engine(url, **kwargs)


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, 'connect')
    def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


# Global engine manager
_engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return _engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker()


async def dispose_engine() -> None:
    await _engine_manager.dispose()


class Base(DeclarativeBase):
    pass


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)


class Database:
    """Session factory for repositories wired through the DI container."""

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Rolls back automatically when the block raises."""
        async with get_session_maker()() as session:
            yield session
