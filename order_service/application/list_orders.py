from order_service.application.dto import OrderResponseDTO, OrderSearchCriteria, Page, PageRequest
from order_service.domain.models import UserRole


class ListOrdersUseCase:
    """Paged search scoped by role; deliberately not cached"""

    def __init__(self, unit_of_work):
        self._uow = unit_of_work

    async def __call__(
        self,
        criteria: OrderSearchCriteria,
        page: PageRequest,
        role: UserRole,
        user_id: str,
    ) -> Page[OrderResponseDTO]:
        async with self._uow(read_only=True) as uow:
            result = await uow.orders.search(criteria, page, role, user_id)
            return Page[OrderResponseDTO](
                items=[OrderResponseDTO.from_domain(order) for order in result.items],
                page=result.page,
                size=result.size,
                total=result.total,
            )
