"""Database storage client

Owns the async engine and session factory. The client is constructed
explicitly, opened once at application startup and disposed at shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import sqlalchemy
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.sql_functions import register_sqlite_functions

# Registers the bills table on SQLModel.metadata
from src.domain.bill import Bill  # noqa: F401

logger = logging.getLogger(__name__)


class Database:
    """
    Storage client for the bill store

    Usage:
        database = Database("sqlite+aiosqlite:///./bills.db")
        await database.connect()
        async with database.session() as session:
            ...
        await database.disconnect()
    """

    def __init__(self, uri: str, echo: bool = False):
        self.uri = uri
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self._session_factory = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self) -> None:
        """
        Open the engine, check the store is reachable and create the schema

        Raises:
            Any driver error if the store cannot be reached. Callers treat
            this as fatal; there is no retry.
        """
        engine = create_async_engine(self.uri, echo=self.echo, future=True)
        register_sqlite_functions(engine.sync_engine)
        try:
            async with engine.begin() as conn:
                await conn.execute(sqlalchemy.text("SELECT 1"))
                await conn.run_sync(SQLModel.metadata.create_all)
        except Exception:
            await engine.dispose()
            raise

        self.engine = engine
        self._session_factory = sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )
        logger.info(f"Connected to database {engine.url.render_as_string(hide_password=True)}")

    async def disconnect(self) -> None:
        """Dispose the engine; safe to call when not connected"""
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database connection closed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        async with self._session_factory() as session:
            yield session
