import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.app.services.key_value_store import IKeyValueStore, KeyValueStoreError

logger = logging.getLogger(__name__)


class RedisKeyValueStore(IKeyValueStore):
    """Redis implementation of the expiring key-value store"""

    def __init__(self, client: Redis):
        self.client = client

    @classmethod
    def from_url(cls, redis_url: str) -> "RedisKeyValueStore":
        client = Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        logger.info(f"Redis key-value store configured: {redis_url}")
        return cls(client)

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            await self.client.set(key, value, ex=ttl_seconds)
        except RedisError as e:
            raise KeyValueStoreError(f"set failed for {key}") from e

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.client.get(key)
        except RedisError as e:
            raise KeyValueStoreError(f"get failed for {key}") from e

    async def delete(self, key: str) -> bool:
        try:
            return await self.client.delete(key) > 0
        except RedisError as e:
            raise KeyValueStoreError(f"delete failed for {key}") from e

    async def take(self, key: str) -> Optional[str]:
        # GETDEL is a single command, so only one caller can see the value
        try:
            return await self.client.getdel(key)
        except RedisError as e:
            raise KeyValueStoreError(f"take failed for {key}") from e

    async def close(self) -> None:
        await self.client.aclose()
