from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class StoreCreate(BaseModel):
    store_id: int
    name: str
    is_active: Optional[str] = None


class StoreUpdate(BaseModel):
    name: str
    is_active: Optional[str] = None


class StoreRead(BaseModel):
    store_id: int
    name: str
    is_active: str
    created_at: datetime

    class Config:
        from_attributes = True
