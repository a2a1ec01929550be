import logging

from order_service.application.caching import ReadThroughCache
from order_service.domain.exceptions import OrderNotFoundError

logger = logging.getLogger(__name__)


class DeleteOrderUseCase:
    def __init__(self, unit_of_work, cache: ReadThroughCache):
        self._uow = unit_of_work
        self._cache = cache

    async def __call__(self, order_id: int, deleted_by: str) -> None:
        async with self._uow() as uow:
            order = await uow.orders.get_by_id(order_id)
            if not order or order.is_deleted:
                raise OrderNotFoundError()

            order.delete(deleted_by)
            await uow.orders.save(order)
            await uow.commit()
        logger.info(f"Order {order_id} soft-deleted by {deleted_by}")

        await self._cache.evict_namespace()
