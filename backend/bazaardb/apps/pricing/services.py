from __future__ import annotations

from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from bazaardb.apps.inventory import services as inventory_services
from bazaardb.utils.flags import normalise_active_flag
from . import models, schemas


def _find_pricing(db: Session, *, store_id: int, product_id: int) -> Optional[models.Pricing]:
    return (
        db.query(models.Pricing)
        .filter(
            models.Pricing.store_id == store_id,
            models.Pricing.product_id == product_id,
        )
        .first()
    )


def list_pricing(db: Session) -> List[models.Pricing]:
    return db.query(models.Pricing).order_by(models.Pricing.store_id, models.Pricing.product_id).all()


def get_pricing(db: Session, *, store_id: int, product_id: int) -> models.Pricing:
    pricing = _find_pricing(db, store_id=store_id, product_id=product_id)
    if not pricing:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pricing record not found")
    return pricing


def create_pricing(db: Session, *, payload: schemas.PricingCreate) -> models.Pricing:
    is_active = normalise_active_flag(payload.is_active)
    if not payload.updated_by:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="updated_by is required")
    if _find_pricing(db, store_id=payload.store_id, product_id=payload.product_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Pricing record already exists for this store and product",
        )
    # A price can only be set for a product the store is configured to carry.
    if not inventory_services.find_store_product(db, store_id=payload.store_id, product_id=payload.product_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid store_id or product_id, record does not exist in store_products",
        )
    pricing = models.Pricing(
        store_id=payload.store_id,
        product_id=payload.product_id,
        price=payload.price,
        updated_by=payload.updated_by,
        is_active=is_active,
    )
    db.add(pricing)
    db.flush()
    return pricing


def update_pricing(
    db: Session,
    *,
    store_id: int,
    product_id: int,
    payload: schemas.PricingUpdate,
) -> models.Pricing:
    if not payload.updated_by:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="updated_by is required")
    pricing = get_pricing(db, store_id=store_id, product_id=product_id)
    pricing.price = payload.price
    pricing.updated_by = payload.updated_by
    db.flush()
    return pricing
