from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKeyConstraint, Integer, Numeric, String, UniqueConstraint

from bazaardb.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Pricing(Base):
    __tablename__ = "pricing"
    __table_args__ = (
        UniqueConstraint("store_id", "product_id", name="uq_pricing_store_product"),
        ForeignKeyConstraint(
            ["store_id", "product_id"],
            ["store_products.store_id", "store_products.product_id"],
            ondelete="CASCADE",
        ),
    )

    pricing_id = Column(Integer, primary_key=True, index=True)
    store_id = Column(Integer, nullable=False, index=True)
    product_id = Column(Integer, nullable=False, index=True)
    price = Column(Numeric(12, 2), nullable=False)
    updated_by = Column(String(64), nullable=False)
    is_active = Column(String(1), nullable=False, default="Y")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
