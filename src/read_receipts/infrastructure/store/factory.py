from __future__ import annotations

from read_receipts.application.ports.store import KeyValueStore
from read_receipts.config import Settings
from read_receipts.infrastructure.db.session import create_engine
from read_receipts.infrastructure.store.memory import InMemoryKeyValueStore
from read_receipts.infrastructure.store.redis_kv import RedisKeyValueStore
from read_receipts.infrastructure.store.sql_kv import SqlKeyValueStore


async def build_store(settings: Settings) -> KeyValueStore:
    if settings.STORE_BACKEND == "redis":
        return RedisKeyValueStore.from_url(settings.REDIS_URL, settings.KV_NAMESPACE)
    if settings.STORE_BACKEND == "sql":
        engine = create_engine(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
        store = SqlKeyValueStore(engine, settings.PLUGIN_ID)
        await store.ensure_schema()
        return store
    return InMemoryKeyValueStore()
