from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from bazaardb.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Store(Base):
    __tablename__ = "stores"

    # Store ids are assigned by the caller, not generated.
    store_id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(128), nullable=False, unique=True, index=True)
    is_active = Column(String(1), nullable=False, default="Y")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
