from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from bazaardb.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductCategory(Base):
    __tablename__ = "product_categories"

    category_id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(128), nullable=False, unique=True, index=True)
    is_active = Column(String(1), nullable=False, default="Y")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    products = relationship("Product", back_populates="category", lazy="selectin")


class Product(Base):
    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False, unique=True, index=True)
    category_id = Column(
        Integer,
        ForeignKey("product_categories.category_id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    is_active = Column(String(1), nullable=False, default="Y")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    category = relationship("ProductCategory", back_populates="products", lazy="joined")
