from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class PricingCreate(BaseModel):
    store_id: int
    product_id: int
    price: Decimal = Field(..., gt=0)
    updated_by: str
    is_active: Optional[str] = None


class PricingUpdate(BaseModel):
    price: Decimal = Field(..., gt=0)
    updated_by: str


class PricingRead(BaseModel):
    pricing_id: int
    store_id: int
    product_id: int
    price: Decimal
    updated_by: str
    is_active: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
