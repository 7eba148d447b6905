"""Redis-backed plugin key/value store."""
from __future__ import annotations

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from read_receipts.application.exceptions import StoreError

logger = logging.getLogger(__name__)


class RedisKeyValueStore:
    """Implements application.ports.store.KeyValueStore."""

    def __init__(self, redis: aioredis.Redis, namespace: str) -> None:
        self._redis = redis
        self._namespace = namespace

    @classmethod
    def from_url(cls, url: str, namespace: str) -> RedisKeyValueStore:
        store = cls(aioredis.from_url(url), namespace)
        logger.info("Redis connection pool created namespace=%s", namespace)
        return store

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    async def put(self, key: str, value: bytes) -> None:
        try:
            await self._redis.set(self._key(key), value)
        except RedisError as exc:
            raise StoreError(str(exc)) from exc

    async def get(self, key: str) -> bytes | None:
        try:
            return await self._redis.get(self._key(key))
        except RedisError as exc:
            raise StoreError(str(exc)) from exc

    async def close(self) -> None:
        await self._redis.aclose()
        logger.info("Redis connection pool closed")
