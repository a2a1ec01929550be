from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from order_service.infrastructure.repositories import SQLAlchemyOrderRepository


class UnitOfWork:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def __call__(self, read_only: bool = False):
        async with self._session_factory() as session:
            try:
                uow_impl = _UnitOfWorkImpl(session, read_only)
                yield uow_impl
                # Not committed explicitly, or read-only: rollback
                await session.rollback()
            except Exception:
                await session.rollback()
                raise


class _UnitOfWorkImpl:
    def __init__(self, session: AsyncSession, read_only: bool):
        self._session = session
        self._read_only = read_only
        self.orders = SQLAlchemyOrderRepository(session)

    async def commit(self):
        if self._read_only:
            raise RuntimeError("Cannot commit a read-only unit of work")
        await self._session.commit()

    async def rollback(self):
        await self._session.rollback()
