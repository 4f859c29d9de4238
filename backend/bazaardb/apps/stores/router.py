from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.orm import Session

from bazaardb.database import get_db
from bazaardb.security import get_current_principal
from bazaardb.utils.headers import require_header

from . import schemas, services

router = APIRouter(
    prefix="/stores",
    tags=["stores"],
    dependencies=[Depends(get_current_principal)],
)


@router.get("", response_model=List[schemas.StoreRead])
def list_stores(db: Session = Depends(get_db)):
    return services.list_stores(db)


@router.get("/store", response_model=schemas.StoreRead)
def get_store(
    store_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    return services.get_store(db, store_id=require_header(store_id, "store_id"))


@router.post("", response_model=schemas.StoreRead, status_code=status.HTTP_201_CREATED)
def create_store(payload: schemas.StoreCreate, db: Session = Depends(get_db)):
    store = services.create_store(db, payload=payload)
    db.commit()
    db.refresh(store)
    return store


@router.post("/update", response_model=schemas.StoreRead)
def update_store(
    payload: schemas.StoreUpdate,
    store_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    store = services.update_store(db, store_id=require_header(store_id, "store_id"), payload=payload)
    db.commit()
    db.refresh(store)
    return store
