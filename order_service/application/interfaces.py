from abc import ABC, abstractmethod
from typing import Optional
from order_service.application.dto import OrderSearchCriteria, Page, PageRequest
from order_service.domain.models import Order, ProductSnapshot, UserRole


class OrderRepository(ABC):
    @abstractmethod
    async def get_by_id(self, order_id: int) -> Optional[Order]:
        pass

    @abstractmethod
    async def save(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def search(
        self,
        criteria: OrderSearchCriteria,
        page: PageRequest,
        role: UserRole,
        user_id: str,
    ) -> Page[Order]:
        pass


class UnitOfWork(ABC):
    @property
    @abstractmethod
    def orders(self) -> OrderRepository:
        pass

    @abstractmethod
    async def __call__(self, read_only: bool = False):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass


class ProductGateway(ABC):
    @abstractmethod
    async def get_product(self, product_id: int) -> ProductSnapshot:
        """Never raises on transport errors: returns ProductSnapshot.fallback instead"""

    @abstractmethod
    async def reduce_quantity(self, product_id: int, amount: int) -> None:
        """Raises ProductServiceUnavailableError when the decrement was not accepted"""


class CacheBackend(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    async def evict_all(self, namespace: str) -> None:
        pass

    @abstractmethod
    async def ping(self) -> bool:
        pass

    @abstractmethod
    async def close(self) -> None:
        pass
