from datetime import datetime
from typing import Literal, Optional
from fastapi import APIRouter, Depends, Header, HTTPException, Query, Response, status

from order_service.presentation.schemas import (
    CreateOrderRequest, UpdateOrderRequest, OrderResponse, OrderPageResponse, ErrorResponse
)
from order_service.presentation.dependencies import (
    get_create_order_use_case,
    get_get_order_use_case,
    get_list_orders_use_case,
    get_update_order_use_case,
    get_delete_order_use_case,
)
from order_service.application.create_order import CreateOrderUseCase
from order_service.application.delete_order import DeleteOrderUseCase
from order_service.application.dto import CreateOrderDTO, OrderSearchCriteria, PageRequest, UpdateOrderDTO
from order_service.application.get_order import GetOrderUseCase
from order_service.application.list_orders import ListOrdersUseCase
from order_service.application.update_order import UpdateOrderUseCase
from order_service.domain.exceptions import (
    OutOfStockError, ProductServiceUnavailableError, OrderNotFoundError, InvalidOrderStatusError
)
from order_service.domain.models import OrderStatus, UserRole

router = APIRouter()


@router.post(
    "/orders",
    response_model=OrderResponse,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    status_code=status.HTTP_201_CREATED
)
async def create_order(
    request: CreateOrderRequest,
    user_id: str = Header(alias="X-User-Id"),
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case)
):
    """Create an order and reserve one unit of every item"""
    try:
        dto = CreateOrderDTO(item_ids=request.order_item_ids, user_id=user_id)
        order = await use_case(dto)
        return OrderResponse.from_dto(order)
    except OutOfStockError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ProductServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get(
    "/orders/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_order(
    order_id: int,
    use_case: GetOrderUseCase = Depends(get_get_order_use_case)
):
    try:
        order = await use_case(order_id)
        return OrderResponse.from_dto(order)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/orders", response_model=OrderPageResponse)
async def list_orders(
    user_id: str = Header(alias="X-User-Id"),
    role: Optional[str] = Header(default=None, alias="X-Role"),
    order_status: Optional[OrderStatus] = Query(default=None, alias="status"),
    created_from: Optional[datetime] = None,
    created_to: Optional[datetime] = None,
    page: int = Query(default=0, ge=0),
    size: int = Query(default=10, ge=1, le=100),
    sort_by: Literal["created_at", "updated_at"] = "created_at",
    descending: bool = True,
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case)
):
    """Orders visible to the caller; members only see their own"""
    criteria = OrderSearchCriteria(status=order_status, created_from=created_from, created_to=created_to)
    page_request = PageRequest(page=page, size=size, sort_by=sort_by, descending=descending)
    result = await use_case(criteria, page_request, UserRole.from_header(role), user_id)
    return OrderPageResponse.from_page(result)


@router.put(
    "/orders/{order_id}",
    response_model=OrderResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)
async def update_order(
    order_id: int,
    request: UpdateOrderRequest,
    user_id: str = Header(alias="X-User-Id"),
    use_case: UpdateOrderUseCase = Depends(get_update_order_use_case)
):
    try:
        dto = UpdateOrderDTO(item_ids=request.order_item_ids, status=request.status)
        order = await use_case(order_id, dto, user_id)
        return OrderResponse.from_dto(order)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidOrderStatusError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete(
    "/orders/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}}
)
async def delete_order(
    order_id: int,
    user_id: str = Header(alias="X-User-Id"),
    use_case: DeleteOrderUseCase = Depends(get_delete_order_use_case)
):
    """Soft delete"""
    try:
        await use_case(order_id, user_id)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
