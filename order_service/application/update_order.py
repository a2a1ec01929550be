import logging

from order_service.application.caching import ReadThroughCache
from order_service.application.dto import OrderResponseDTO, UpdateOrderDTO
from order_service.domain.exceptions import OrderNotFoundError
from order_service.domain.models import OrderStatus

logger = logging.getLogger(__name__)


class UpdateOrderUseCase:
    def __init__(self, unit_of_work, cache: ReadThroughCache[OrderResponseDTO]):
        self._uow = unit_of_work
        self._cache = cache

    async def __call__(self, order_id: int, dto: UpdateOrderDTO, user_id: str) -> OrderResponseDTO:
        async with self._uow() as uow:
            order = await uow.orders.get_by_id(order_id)
            if not order or order.is_deleted:
                raise OrderNotFoundError()

            status = OrderStatus.parse(dto.status)
            order.update(dto.item_ids, user_id, status)
            order = await uow.orders.save(order)
            await uow.commit()
        logger.info(f"Order {order_id} updated by {user_id}: status {status.value}")

        # Other cached entries may render this order too, drop the namespace
        await self._cache.evict_namespace()
        return OrderResponseDTO.from_domain(order)
