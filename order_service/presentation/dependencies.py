from functools import lru_cache
from fastapi import Depends
import redis.asyncio as aioredis

from order_service.config import settings
from order_service.database import AsyncSessionLocal
from order_service.application.caching import ReadThroughCache
from order_service.application.create_order import CreateOrderUseCase
from order_service.application.delete_order import DeleteOrderUseCase
from order_service.application.dto import OrderResponseDTO
from order_service.application.get_order import GetOrderUseCase
from order_service.application.interfaces import CacheBackend, ProductGateway
from order_service.application.list_orders import ListOrdersUseCase
from order_service.application.update_order import UpdateOrderUseCase
from order_service.infrastructure.cache import InMemoryCacheBackend, RedisCacheBackend
from order_service.infrastructure.http_clients import HTTPProductClient
from order_service.infrastructure.unit_of_work import UnitOfWork


def get_unit_of_work() -> UnitOfWork:
    return UnitOfWork(AsyncSessionLocal)


def get_product_gateway() -> ProductGateway:
    return HTTPProductClient(
        settings.PRODUCT_SERVICE_URL,
        settings.API_TOKEN,
        timeout=settings.PRODUCT_SERVICE_TIMEOUT
    )


@lru_cache
def get_cache_backend() -> CacheBackend:
    # One backend per process; the in-memory one must outlive requests
    if settings.CACHE_BACKEND == "memory":
        return InMemoryCacheBackend()
    return RedisCacheBackend(
        aioredis.from_url(settings.REDIS_URL, decode_responses=True),
        ttl=settings.ORDER_CACHE_TTL
    )


def get_order_cache(backend: CacheBackend = Depends(get_cache_backend)) -> ReadThroughCache[OrderResponseDTO]:
    return ReadThroughCache(backend, settings.ORDER_CACHE_NAMESPACE, OrderResponseDTO)


# Use case factories
def get_create_order_use_case(
    uow: UnitOfWork = Depends(get_unit_of_work),
    products: ProductGateway = Depends(get_product_gateway)
):
    return CreateOrderUseCase(uow, products)


def get_get_order_use_case(
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: ReadThroughCache = Depends(get_order_cache)
):
    return GetOrderUseCase(uow, cache)


def get_list_orders_use_case(uow: UnitOfWork = Depends(get_unit_of_work)):
    return ListOrdersUseCase(uow)


def get_update_order_use_case(
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: ReadThroughCache = Depends(get_order_cache)
):
    return UpdateOrderUseCase(uow, cache)


def get_delete_order_use_case(
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: ReadThroughCache = Depends(get_order_cache)
):
    return DeleteOrderUseCase(uow, cache)
