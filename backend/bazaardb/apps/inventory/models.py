from __future__ import annotations

import enum
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from bazaardb.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MovementTypeEnum(str, enum.Enum):
    STOCK_IN = "stock_in"
    SELL = "sell"
    REMOVE = "remove"


class StoreProduct(Base):
    """Stocking policy for one product at one store."""

    __tablename__ = "store_products"

    store_id = Column(Integer, ForeignKey("stores.store_id", ondelete="CASCADE"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.product_id", ondelete="CASCADE"), primary_key=True)
    # min <= max is expected but not enforced
    min_quantity = Column(Integer, nullable=False)
    max_quantity = Column(Integer, nullable=False)
    is_active = Column(String(1), nullable=False, default="Y")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)


class Inventory(Base):
    __tablename__ = "inventory"
    __table_args__ = (
        UniqueConstraint("store_id", "product_id", name="uq_inventory_store_product"),
    )

    inventory_id = Column(Integer, primary_key=True, index=True)
    store_id = Column(Integer, ForeignKey("stores.store_id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.product_id", ondelete="CASCADE"), nullable=False, index=True)
    current_quantity = Column(Integer, nullable=False, default=0)
    last_updated = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class ProductTransaction(Base):
    """
    Append-only movement log.

    `quantity` is always the positive magnitude the caller submitted; the
    direction comes from `movement_type`.
    """

    __tablename__ = "product_transactions"
    __table_args__ = (
        Index("ix_product_transactions_store_product", "store_id", "product_id", "timestamp"),
    )

    transaction_id = Column(Integer, primary_key=True, index=True)
    store_id = Column(Integer, ForeignKey("stores.store_id", ondelete="RESTRICT"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.product_id", ondelete="RESTRICT"), nullable=False)
    quantity = Column(Integer, nullable=False)
    movement_type = Column(
        SAEnum(
            MovementTypeEnum,
            name="movement_type_enum",
            native_enum=False,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        index=True,
    )
    updated_by = Column(String(64), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.supplier_id", ondelete="SET NULL"), nullable=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
