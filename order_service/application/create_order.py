import logging

from order_service.application.dto import CreateOrderDTO, OrderResponseDTO
from order_service.application.interfaces import ProductGateway, UnitOfWork
from order_service.domain.exceptions import OutOfStockError, ProductServiceUnavailableError
from order_service.domain.models import Order


logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    def __init__(self, unit_of_work: UnitOfWork, product_gateway: ProductGateway):
        self._uow = unit_of_work
        self._products = product_gateway

    async def __call__(self, order_data: CreateOrderDTO) -> OrderResponseDTO:
        logger.info(f"Creating order for user {order_data.user_id}, items {order_data.item_ids}")

        # 1. Stock check for the whole item set before anything is reserved
        for product_id in order_data.item_ids:
            product = await self._products.get_product(product_id)
            logger.info(f"Product {product_id} quantity: {product.quantity}")
            if not product.in_stock:
                raise OutOfStockError(product_id)

        # 2. Reservation, one unit per item id, in request order.
        # Remote decrements are outside the local transaction and are not
        # rolled back if a later one fails.
        reserved: list[int] = []
        for product_id in order_data.item_ids:
            try:
                await self._products.reduce_quantity(product_id, 1)
            except ProductServiceUnavailableError:
                if reserved:
                    logger.error(
                        f"Reservation failed on product {product_id}; "
                        f"already reserved and not compensated: {reserved}"
                    )
                raise
            reserved.append(product_id)

        # 3. Persist
        async with self._uow() as uow:
            order = await uow.orders.save(Order.create(order_data.item_ids, order_data.user_id))
            await uow.commit()
        logger.info(f"Order created: {order.id}")

        return OrderResponseDTO.from_domain(order)
