from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from order_service.application.dto import OrderSearchCriteria, Page, PageRequest
from order_service.application.interfaces import OrderRepository
from order_service.domain.models import Order, OrderStatus, UserRole
from order_service.infrastructure.db_schema import orders_tbl


class SQLAlchemyOrderRepository(OrderRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, order_id: int) -> Optional[Order]:
        result = await self._session.execute(
            select(orders_tbl).where(orders_tbl.c.id == order_id)
        )
        row = result.fetchone()
        return self._to_domain(row) if row else None

    async def save(self, order: Order) -> Order:
        values = dict(
            item_ids=list(order.item_ids),
            status=order.status,
            created_at=order.created_at,
            created_by=order.created_by,
            updated_at=order.updated_at,
            updated_by=order.updated_by,
            deleted_at=order.deleted_at,
            deleted_by=order.deleted_by
        )
        if order.id is None:
            result = await self._session.execute(insert(orders_tbl).values(**values))
            return order.model_copy(update={"id": result.inserted_primary_key[0]})

        await self._session.execute(
            update(orders_tbl)
            .where(orders_tbl.c.id == order.id)
            .values(**values)
        )
        return order

    async def search(
        self,
        criteria: OrderSearchCriteria,
        page: PageRequest,
        role: UserRole,
        user_id: str,
    ) -> Page[Order]:
        conditions = [orders_tbl.c.deleted_at.is_(None)]
        if not role.sees_all_orders:
            conditions.append(orders_tbl.c.created_by == user_id)
        if criteria.status is not None:
            conditions.append(orders_tbl.c.status == criteria.status)
        if criteria.created_from is not None:
            conditions.append(orders_tbl.c.created_at >= criteria.created_from)
        if criteria.created_to is not None:
            conditions.append(orders_tbl.c.created_at <= criteria.created_to)

        total = await self._session.scalar(
            select(func.count()).select_from(orders_tbl).where(*conditions)
        )

        sort_column = orders_tbl.c[page.sort_by]
        order_by = sort_column.desc() if page.descending else sort_column.asc()
        result = await self._session.execute(
            select(orders_tbl)
            .where(*conditions)
            .order_by(order_by, orders_tbl.c.id.asc())
            .offset(page.offset)
            .limit(page.size)
        )
        rows = result.fetchall()

        return Page[Order](
            items=[self._to_domain(row) for row in rows],
            page=page.page,
            size=page.size,
            total=total or 0,
        )

    def _to_domain(self, row) -> Order:
        """DB row → Domain"""
        return Order(
            id=row.id,
            item_ids=list(row.item_ids),
            status=OrderStatus(row.status),
            created_at=_as_utc(row.created_at),
            created_by=row.created_by,
            updated_at=_as_utc(row.updated_at),
            updated_by=row.updated_by,
            deleted_at=_as_utc(row.deleted_at),
            deleted_by=row.deleted_by
        )


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops the offset; values are always written in UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
