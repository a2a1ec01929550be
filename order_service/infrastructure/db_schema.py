from sqlalchemy import Table, Column, String, Integer, Enum, DateTime, JSON, MetaData
from sqlalchemy.sql import func

from order_service.domain.models import OrderStatus

metadata = MetaData()


orders_tbl = Table(
    "orders",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("item_ids", JSON, nullable=False),
    Column("status", Enum(OrderStatus, name="order_status"), nullable=False, default=OrderStatus.CREATED),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("created_by", String, nullable=False, index=True),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_by", String, nullable=False),
    Column("deleted_at", DateTime(timezone=True), nullable=True),
    Column("deleted_by", String, nullable=True)
)
