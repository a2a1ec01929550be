from pydantic import BaseModel, Field
from datetime import datetime

from order_service.application.dto import OrderResponseDTO, Page


class CreateOrderRequest(BaseModel):
    order_item_ids: list[int] = Field(min_length=1)


class UpdateOrderRequest(BaseModel):
    order_item_ids: list[int] = Field(min_length=1)
    status: str


class OrderResponse(BaseModel):
    order_id: int
    status: str
    created_at: datetime
    created_by: str
    updated_at: datetime
    updated_by: str
    order_item_ids: list[int]

    @classmethod
    def from_dto(cls, dto: OrderResponseDTO):
        return cls(**dto.model_dump())


class OrderPageResponse(BaseModel):
    items: list[OrderResponse]
    page: int
    size: int
    total: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page[OrderResponseDTO]):
        return cls(
            items=[OrderResponse.from_dto(dto) for dto in page.items],
            page=page.page,
            size=page.size,
            total=page.total,
            total_pages=page.total_pages
        )


class ErrorResponse(BaseModel):
    detail: str


class HealthResponse(BaseModel):
    status: str
    database: bool
    cache: bool
