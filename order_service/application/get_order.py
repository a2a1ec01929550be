from order_service.application.caching import ReadThroughCache
from order_service.application.dto import OrderResponseDTO
from order_service.domain.exceptions import OrderNotFoundError


class GetOrderUseCase:
    def __init__(self, unit_of_work, cache: ReadThroughCache[OrderResponseDTO]):
        self._uow = unit_of_work
        self._cache = cache

    async def __call__(self, order_id: int) -> OrderResponseDTO:
        return await self._cache.get_or_compute(order_id, lambda: self._load(order_id))

    async def _load(self, order_id: int) -> OrderResponseDTO:
        async with self._uow(read_only=True) as uow:
            order = await uow.orders.get_by_id(order_id)
            if not order or order.is_deleted:
                raise OrderNotFoundError()
            return OrderResponseDTO.from_domain(order)
