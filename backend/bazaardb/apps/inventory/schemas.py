from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from . import models


class StoreProductCreate(BaseModel):
    store_id: int
    product_id: int
    min_quantity: int
    max_quantity: int
    is_active: Optional[str] = None


class StoreProductUpdate(BaseModel):
    product_id: Optional[int] = None
    min_quantity: int
    max_quantity: int
    is_active: str


class StoreProductRead(BaseModel):
    store_id: int
    product_id: int
    min_quantity: int
    max_quantity: int
    is_active: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class InventoryCreate(BaseModel):
    store_id: int
    product_id: int
    current_quantity: int = Field(0, ge=0)


class InventoryUpdate(BaseModel):
    current_quantity: int = Field(..., ge=0)


class InventoryRead(BaseModel):
    inventory_id: int
    store_id: int
    product_id: int
    current_quantity: int
    last_updated: datetime

    class Config:
        from_attributes = True


class ProductTransactionCreate(BaseModel):
    # Everything is optional here so that missing fields reach the
    # coordinator and come back as "Empty Data" rather than a 422.
    store_id: Optional[int] = None
    product_id: Optional[int] = None
    quantity: Optional[int] = None
    updated_by: Optional[str] = None
    supplier_id: Optional[int] = None
    movement_type: Optional[str] = None


class ProductTransactionRead(BaseModel):
    transaction_id: int
    store_id: int
    product_id: int
    quantity: int
    movement_type: models.MovementTypeEnum
    updated_by: str
    supplier_id: Optional[int] = None
    timestamp: datetime

    class Config:
        from_attributes = True


class ProductTransactionResult(BaseModel):
    message: str


class TransactionSummary(BaseModel):
    stock_in_count: int = 0
    sell_count: int = 0
    remove_count: int = 0
