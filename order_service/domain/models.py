from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel

from order_service.domain.exceptions import InvalidOrderStatusError


class OrderStatus(str, Enum):
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    SHIPPED = "SHIPPED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value: str) -> "OrderStatus":
        try:
            return cls(value)
        except ValueError:
            raise InvalidOrderStatusError(value)


class UserRole(str, Enum):
    MEMBER = "MEMBER"
    MANAGER = "MANAGER"
    MASTER = "MASTER"

    @classmethod
    def from_header(cls, value: Optional[str]) -> "UserRole":
        """Unknown or missing roles get the narrowest visibility"""
        try:
            return cls((value or "").upper())
        except ValueError:
            return cls.MEMBER

    @property
    def sees_all_orders(self) -> bool:
        return self in (UserRole.MANAGER, UserRole.MASTER)


class Order(BaseModel):
    """Domain Entity: order"""
    id: int | None = None
    item_ids: list[int]
    status: OrderStatus
    created_at: datetime
    created_by: str
    updated_at: datetime
    updated_by: str
    deleted_at: datetime | None = None
    deleted_by: str | None = None

    @classmethod
    def create(cls, item_ids: list[int], user_id: str) -> "Order":
        now = datetime.now(timezone.utc)
        return cls(
            item_ids=list(item_ids),
            status=OrderStatus.CREATED,
            created_at=now,
            created_by=user_id,
            updated_at=now,
            updated_by=user_id,
        )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def update(self, item_ids: list[int], user_id: str, status: OrderStatus) -> None:
        self.item_ids = list(item_ids)
        self.status = status
        self.updated_at = datetime.now(timezone.utc)
        self.updated_by = user_id

    def delete(self, deleted_by: str) -> None:
        """Soft delete: the row stays, only the marker is set"""
        self.deleted_at = datetime.now(timezone.utc)
        self.deleted_by = deleted_by


class ProductSnapshot(BaseModel):
    """Value Object: product as reported by the product service"""
    id: int
    name: str
    description: str | None = None
    price: int
    quantity: int

    @classmethod
    def fallback(cls, product_id: int) -> "ProductSnapshot":
        return cls(
            id=product_id,
            name="Unavailable Product",
            description="Product service is down. This is fallback response.",
            price=0,
            quantity=0,
        )

    @property
    def in_stock(self) -> bool:
        return self.quantity >= 1
