from __future__ import annotations


class InMemoryKeyValueStore:
    """Process-local store for tests and local development."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    async def put(self, key: str, value: bytes) -> None:
        self._data[key] = value

    async def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    async def close(self) -> None:
        pass

    def __len__(self) -> int:
        return len(self._data)
