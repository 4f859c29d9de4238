from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.orm import Session

from bazaardb.database import get_db
from bazaardb.security import get_current_principal
from bazaardb.utils.headers import require_header

from . import schemas, services

router = APIRouter(
    prefix="/pricing",
    tags=["pricing"],
    dependencies=[Depends(get_current_principal)],
)


@router.get("", response_model=List[schemas.PricingRead])
def list_pricing(db: Session = Depends(get_db)):
    return services.list_pricing(db)


@router.get("/item", response_model=schemas.PricingRead)
def get_pricing(
    store_id: Optional[int] = Header(None, convert_underscores=False),
    product_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    return services.get_pricing(
        db,
        store_id=require_header(store_id, "store_id"),
        product_id=require_header(product_id, "product_id"),
    )


@router.post("", response_model=schemas.PricingRead, status_code=status.HTTP_201_CREATED)
def create_pricing(payload: schemas.PricingCreate, db: Session = Depends(get_db)):
    pricing = services.create_pricing(db, payload=payload)
    db.commit()
    db.refresh(pricing)
    return pricing


@router.post("/update", response_model=schemas.PricingRead)
def update_pricing(
    payload: schemas.PricingUpdate,
    store_id: Optional[int] = Header(None, convert_underscores=False),
    product_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    pricing = services.update_pricing(
        db,
        store_id=require_header(store_id, "store_id"),
        product_id=require_header(product_id, "product_id"),
        payload=payload,
    )
    db.commit()
    db.refresh(pricing)
    return pricing
