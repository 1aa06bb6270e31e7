import time
from typing import Callable, Dict, Optional, Tuple

from src.app.services.key_value_store import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """
    Process-local key-value store.

    Used when CACHE_BACKEND is "memory" (development and tests). Entries
    expire lazily on read. Operations never await, so each one is atomic
    with respect to other coroutines on the same event loop.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._data: Dict[str, Tuple[str, float]] = {}

    def _live(self, key: str) -> Optional[str]:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at <= self._clock():
            del self._data[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._data[key] = (value, self._clock() + ttl_seconds)

    async def get(self, key: str) -> Optional[str]:
        return self._live(key)

    async def delete(self, key: str) -> bool:
        existed = self._live(key) is not None
        self._data.pop(key, None)
        return existed

    async def take(self, key: str) -> Optional[str]:
        value = self._live(key)
        self._data.pop(key, None)
        return value

    async def close(self) -> None:
        self._data.clear()
