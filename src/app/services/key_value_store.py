from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStoreError(Exception):
    """Raised when the key-value backend cannot complete an operation"""


class IKeyValueStore(ABC):
    """
    Expiring key-value store - application layer.

    Holds sessions and password reset tokens. Values are strings.
    """

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store value under key, expiring after ttl_seconds"""
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get value, or None if missing or expired"""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete key. Returns True if it existed."""
        pass

    @abstractmethod
    async def take(self, key: str) -> Optional[str]:
        """
        Atomically get and delete key.

        Of several concurrent callers, at most one receives the value.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release backend connections"""
        pass
