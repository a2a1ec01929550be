import math
from datetime import datetime
from typing import Generic, Literal, Optional, TypeVar
from pydantic import BaseModel, Field

from order_service.domain.models import Order, OrderStatus

T = TypeVar("T")


class CreateOrderDTO(BaseModel):
    item_ids: list[int]
    user_id: str


class UpdateOrderDTO(BaseModel):
    item_ids: list[int]
    # raw value, parsed by the use case so an unknown status is a domain error
    status: str


class OrderSearchCriteria(BaseModel):
    status: Optional[OrderStatus] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None


class PageRequest(BaseModel):
    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1, le=100)
    sort_by: Literal["created_at", "updated_at"] = "created_at"
    descending: bool = True

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    items: list[T]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0


class OrderResponseDTO(BaseModel):
    """Rendered order, also the value kept in the response cache"""
    order_id: int
    status: str
    created_at: datetime
    created_by: str
    updated_at: datetime
    updated_by: str
    order_item_ids: list[int]

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponseDTO":
        return cls(
            order_id=order.id,
            status=order.status.value,
            created_at=order.created_at,
            created_by=order.created_by,
            updated_at=order.updated_at,
            updated_by=order.updated_by,
            order_item_ids=list(order.item_ids),
        )
