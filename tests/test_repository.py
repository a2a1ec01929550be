"""
SQLAlchemy order repository and unit of work against in-memory SQLite.
"""
from datetime import datetime, timedelta, timezone

import pytest

from order_service.application.dto import OrderSearchCriteria, PageRequest
from order_service.domain.models import Order, OrderStatus, UserRole


async def seed(uow, *orders: Order) -> list[Order]:
    saved = []
    async with uow() as tx:
        for order in orders:
            saved.append(await tx.orders.save(order))
        await tx.commit()
    return saved


async def search(uow, role=UserRole.MASTER, user_id="admin", criteria=None, page=None):
    async with uow(read_only=True) as tx:
        return await tx.orders.search(criteria or OrderSearchCriteria(), page or PageRequest(), role, user_id)


@pytest.mark.asyncio
async def test_save_assigns_id_and_round_trips(uow):
    [saved] = await seed(uow, Order.create([3, 1, 3], "alice"))

    assert saved.id is not None
    async with uow(read_only=True) as tx:
        loaded = await tx.orders.get_by_id(saved.id)
    assert loaded.item_ids == [3, 1, 3]
    assert loaded.status == OrderStatus.CREATED
    assert loaded.created_by == "alice"
    assert loaded.created_at.tzinfo is not None
    assert loaded.created_at == saved.created_at


@pytest.mark.asyncio
async def test_save_existing_order_updates_in_place(uow):
    [saved] = await seed(uow, Order.create([1], "alice"))
    saved.update([2], "bob", OrderStatus.COMPLETED)
    await seed(uow, saved)

    async with uow(read_only=True) as tx:
        loaded = await tx.orders.get_by_id(saved.id)
    assert loaded.item_ids == [2]
    assert loaded.status == OrderStatus.COMPLETED
    assert (await search(uow)).total == 1


@pytest.mark.asyncio
async def test_get_by_id_unknown_returns_none(uow):
    async with uow(read_only=True) as tx:
        assert await tx.orders.get_by_id(42) is None


@pytest.mark.asyncio
async def test_search_scopes_members_to_their_own_orders(uow):
    await seed(uow, Order.create([1], "alice"), Order.create([2], "bob"), Order.create([3], "alice"))

    member_view = await search(uow, role=UserRole.MEMBER, user_id="alice")
    manager_view = await search(uow, role=UserRole.MANAGER, user_id="carol")

    assert member_view.total == 2
    assert {o.created_by for o in member_view.items} == {"alice"}
    assert manager_view.total == 3


@pytest.mark.asyncio
async def test_search_skips_soft_deleted(uow):
    kept, gone = await seed(uow, Order.create([1], "alice"), Order.create([2], "alice"))
    gone.delete("alice")
    await seed(uow, gone)

    result = await search(uow)

    assert [o.id for o in result.items] == [kept.id]


@pytest.mark.asyncio
async def test_search_filters_by_status(uow):
    created, shipped = await seed(uow, Order.create([1], "alice"), Order.create([2], "alice"))
    shipped.update([2], "alice", OrderStatus.SHIPPED)
    await seed(uow, shipped)

    result = await search(uow, criteria=OrderSearchCriteria(status=OrderStatus.SHIPPED))

    assert [o.id for o in result.items] == [shipped.id]


@pytest.mark.asyncio
async def test_search_created_from_in_future_is_empty(uow):
    await seed(uow, Order.create([1], "alice"))
    tomorrow = datetime.now(timezone.utc) + timedelta(days=1)

    result = await search(uow, criteria=OrderSearchCriteria(created_from=tomorrow))

    assert result.total == 0
    assert result.items == []


@pytest.mark.asyncio
async def test_search_pages_and_sorts(uow):
    saved = await seed(uow, *[Order.create([i], "alice") for i in range(5)])

    first = await search(uow, page=PageRequest(page=0, size=2, descending=False))
    last = await search(uow, page=PageRequest(page=2, size=2, descending=False))

    assert first.total == 5
    assert first.total_pages == 3
    assert [o.id for o in first.items] == [saved[0].id, saved[1].id]
    assert [o.id for o in last.items] == [saved[4].id]


@pytest.mark.asyncio
async def test_uncommitted_work_is_rolled_back(uow):
    async with uow() as tx:
        await tx.orders.save(Order.create([1], "alice"))

    assert (await search(uow)).total == 0


@pytest.mark.asyncio
async def test_error_inside_unit_of_work_rolls_back(uow):
    with pytest.raises(ValueError):
        async with uow() as tx:
            await tx.orders.save(Order.create([1], "alice"))
            raise ValueError("boom")

    assert (await search(uow)).total == 0


@pytest.mark.asyncio
async def test_read_only_unit_of_work_refuses_commit(uow):
    with pytest.raises(RuntimeError):
        async with uow(read_only=True) as tx:
            await tx.orders.save(Order.create([1], "alice"))
            await tx.commit()

    assert (await search(uow)).total == 0
