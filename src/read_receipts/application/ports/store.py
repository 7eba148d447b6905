from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Host-style plugin key/value store. ``get`` returns None when absent."""

    async def put(self, key: str, value: bytes) -> None: ...
    async def get(self, key: str) -> bytes | None: ...
    async def close(self) -> None: ...
