from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ProductCategoryCreate(BaseModel):
    category_id: int
    name: str
    is_active: Optional[str] = None


class ProductCategoryUpdate(BaseModel):
    name: str
    is_active: Optional[str] = None


class ProductCategoryRead(BaseModel):
    category_id: int
    name: str
    is_active: str
    created_at: datetime

    class Config:
        from_attributes = True


class ProductCreate(BaseModel):
    product_id: int
    name: str
    category_id: int
    is_active: Optional[str] = None


class ProductUpdate(BaseModel):
    name: str
    category_id: int
    is_active: Optional[str] = None


class ProductRead(BaseModel):
    product_id: int
    name: str
    category_id: int
    is_active: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
