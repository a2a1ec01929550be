import logging
from typing import Optional
import redis.asyncio as aioredis
from redis.exceptions import RedisError

from order_service.application.interfaces import CacheBackend

logger = logging.getLogger(__name__)


class RedisCacheBackend(CacheBackend):
    def __init__(self, redis: aioredis.Redis, ttl: int = 0):
        self._redis = redis
        self._ttl = ttl

    async def get(self, key: str) -> Optional[str]:
        value = await self._redis.get(key)
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def put(self, key: str, value: str) -> None:
        await self._redis.set(key, value, ex=self._ttl or None)

    async def evict_all(self, namespace: str) -> None:
        keys = [key async for key in self._redis.scan_iter(match=f"{namespace}::*")]
        if keys:
            await self._redis.delete(*keys)
        logger.info(f"Evicted {len(keys)} keys from {namespace}")

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except RedisError as e:
            logger.error(f"Redis ping failed: {e}")
            return False

    async def close(self) -> None:
        await self._redis.aclose()
        logger.info("Redis connection closed")


class InMemoryCacheBackend(CacheBackend):
    """Process-local cache, no expiry"""

    def __init__(self):
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        self._data[key] = value

    async def evict_all(self, namespace: str) -> None:
        prefix = f"{namespace}::"
        for key in [k for k in self._data if k.startswith(prefix)]:
            del self._data[key]

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._data.clear()
