from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from bazaardb.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Supplier(Base):
    __tablename__ = "suppliers"

    supplier_id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False, unique=True, index=True)
    contact_info = Column(Text, nullable=True)
    is_active = Column(String(1), nullable=False, default="Y")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    orders = relationship("SupplierOrderProduct", back_populates="supplier", lazy="selectin")


class SupplierOrderProduct(Base):
    __tablename__ = "supplier_order_products"
    __table_args__ = (
        Index("ix_supplier_orders_store_product", "store_id", "product_id"),
    )

    order_id = Column(Integer, primary_key=True, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.supplier_id", ondelete="RESTRICT"), nullable=False, index=True)
    store_id = Column(Integer, ForeignKey("stores.store_id", ondelete="RESTRICT"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.product_id", ondelete="RESTRICT"), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    supplier = relationship("Supplier", back_populates="orders", lazy="joined")
