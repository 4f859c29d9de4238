from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class SupplierCreate(BaseModel):
    supplier_id: int
    name: str
    contact_info: Optional[str] = None
    is_active: Optional[str] = None


class SupplierUpdate(BaseModel):
    name: str
    contact_info: Optional[str] = None
    is_active: Optional[str] = None


class SupplierRead(BaseModel):
    supplier_id: int
    name: str
    contact_info: Optional[str] = None
    is_active: str
    created_at: datetime

    class Config:
        from_attributes = True


class SupplierOrderCreate(BaseModel):
    supplier_id: int
    store_id: int
    product_id: int
    quantity: int = Field(..., gt=0)
    price: Decimal = Field(..., gt=0)


class SupplierOrderRead(SupplierOrderCreate):
    order_id: int
    created_at: datetime

    class Config:
        from_attributes = True
