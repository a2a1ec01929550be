"""
Shared fixtures: in-memory SQLite unit of work, in-memory cache and a
scripted product gateway.
"""
import os

os.environ.setdefault("POSTGRES_CONNECTION_STRING", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CACHE_BACKEND", "memory")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from order_service.application.caching import ReadThroughCache
from order_service.application.dto import OrderResponseDTO
from order_service.application.interfaces import ProductGateway
from order_service.database import create_tables
from order_service.domain.exceptions import ProductServiceUnavailableError
from order_service.domain.models import ProductSnapshot
from order_service.infrastructure.cache import InMemoryCacheBackend
from order_service.infrastructure.unit_of_work import UnitOfWork


class FakeProductGateway(ProductGateway):
    """Product service double.

    ``stock`` maps product id to quantity; unknown ids get the fallback
    snapshot, as the HTTP client does when the service cannot answer.
    """

    def __init__(self, stock: dict[int, int] | None = None, unavailable: set[int] | None = None):
        self.stock = dict(stock or {})
        self.unavailable = set(unavailable or ())
        self.lookups: list[int] = []
        self.reservations: list[tuple[int, int]] = []

    async def get_product(self, product_id: int) -> ProductSnapshot:
        self.lookups.append(product_id)
        if product_id not in self.stock:
            return ProductSnapshot.fallback(product_id)
        return ProductSnapshot(
            id=product_id,
            name=f"Product {product_id}",
            description=None,
            price=1000,
            quantity=self.stock[product_id],
        )

    async def reduce_quantity(self, product_id: int, amount: int) -> None:
        if product_id in self.unavailable:
            raise ProductServiceUnavailableError()
        self.reservations.append((product_id, amount))
        self.stock[product_id] -= amount


@pytest_asyncio.fixture(scope="function")
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def uow(session_factory):
    return UnitOfWork(session_factory)


@pytest.fixture
def products():
    return FakeProductGateway({10: 5, 20: 5, 30: 1})


@pytest.fixture
def cache_backend():
    return InMemoryCacheBackend()


@pytest.fixture
def order_cache(cache_backend):
    return ReadThroughCache(cache_backend, "orders", OrderResponseDTO)
