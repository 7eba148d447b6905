"""Key/value store on the host's SQL database."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from read_receipts.application.exceptions import StoreError
from read_receipts.infrastructure.db.base import Base
from read_receipts.infrastructure.db.models import PluginKeyValueModel
from read_receipts.infrastructure.db.session import create_session_factory

logger = logging.getLogger(__name__)


class SqlKeyValueStore:
    """Rows are scoped to one plugin id; ``put`` is an upsert."""

    def __init__(
        self,
        engine: AsyncEngine,
        plugin_id: str,
        sessions: async_sessionmaker[AsyncSession] | None = None,
    ) -> None:
        self._engine = engine
        self._plugin_id = plugin_id
        self._sessions = sessions or create_session_factory(engine)

    async def ensure_schema(self) -> None:
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(str(exc)) from exc
        logger.info("Key/value schema ready plugin_id=%s", self._plugin_id)

    async def put(self, key: str, value: bytes) -> None:
        stmt = (
            pg_insert(PluginKeyValueModel)
            .values(plugin_id=self._plugin_id, pkey=key, pvalue=value)
            .on_conflict_do_update(
                index_elements=["plugin_id", "pkey"],
                set_={"pvalue": value},
            )
        )
        try:
            async with self._sessions() as session:
                await session.execute(stmt)
                await session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(str(exc)) from exc

    async def get(self, key: str) -> bytes | None:
        stmt = select(PluginKeyValueModel.pvalue).where(
            PluginKeyValueModel.plugin_id == self._plugin_id,
            PluginKeyValueModel.pkey == key,
        )
        try:
            async with self._sessions() as session:
                result = await session.execute(stmt)
                return result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(str(exc)) from exc

    async def close(self) -> None:
        await self._engine.dispose()
        logger.info("Database engine disposed")
