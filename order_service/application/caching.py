import logging
from typing import Awaitable, Callable, Generic, Optional, Type, TypeVar
from pydantic import BaseModel

from order_service.application.interfaces import CacheBackend

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ReadThroughCache(Generic[M]):
    """Read-through cache for rendered responses under one namespace.

    Values are stored as JSON of ``model``. A loader that raises or
    returns None leaves the cache untouched.
    """

    def __init__(self, backend: CacheBackend, namespace: str, model: Type[M]):
        self._backend = backend
        self._namespace = namespace
        self._model = model

    @property
    def namespace(self) -> str:
        return self._namespace

    def _key(self, key) -> str:
        return f"{self._namespace}::{key}"

    async def get_or_compute(self, key, loader: Callable[[], Awaitable[Optional[M]]]) -> Optional[M]:
        cache_key = self._key(key)
        cached = await self._backend.get(cache_key)
        if cached is not None:
            logger.info(f"Cache hit: {cache_key}")
            return self._model.model_validate_json(cached)

        logger.info(f"Cache miss: {cache_key}")
        value = await loader()
        if value is not None:
            await self._backend.put(cache_key, value.model_dump_json())
        return value

    async def evict_namespace(self) -> None:
        await self._backend.evict_all(self._namespace)
        logger.info(f"Cache namespace evicted: {self._namespace}")
