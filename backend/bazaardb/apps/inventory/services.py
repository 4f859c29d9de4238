from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from bazaardb.apps.catalog import services as catalog_services
from bazaardb.apps.stores import services as store_services
from bazaardb.utils.flags import normalise_active_flag
from . import models, schemas


# ---------------------------------------------------------------------------
# STORE PRODUCTS (stocking policy)
# ---------------------------------------------------------------------------


def _ensure_store_and_product(db: Session, *, store_id: int, product_id: int) -> None:
    store_services.get_store(db, store_id=store_id)
    catalog_services.get_product(db, product_id=product_id)


def find_store_product(db: Session, *, store_id: int, product_id: int) -> Optional[models.StoreProduct]:
    return (
        db.query(models.StoreProduct)
        .filter(
            models.StoreProduct.store_id == store_id,
            models.StoreProduct.product_id == product_id,
        )
        .first()
    )


def list_store_products(db: Session) -> List[models.StoreProduct]:
    return (
        db.query(models.StoreProduct)
        .order_by(models.StoreProduct.store_id, models.StoreProduct.product_id)
        .all()
    )


def get_store_product(db: Session, *, store_id: int, product_id: int) -> models.StoreProduct:
    store_product = find_store_product(db, store_id=store_id, product_id=product_id)
    if not store_product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found in store")
    return store_product


def create_store_product(db: Session, *, payload: schemas.StoreProductCreate) -> models.StoreProduct:
    is_active = normalise_active_flag(payload.is_active)
    if find_store_product(db, store_id=payload.store_id, product_id=payload.product_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Store-product relationship already exists",
        )
    _ensure_store_and_product(db, store_id=payload.store_id, product_id=payload.product_id)
    store_product = models.StoreProduct(
        store_id=payload.store_id,
        product_id=payload.product_id,
        min_quantity=payload.min_quantity,
        max_quantity=payload.max_quantity,
        is_active=is_active,
    )
    db.add(store_product)
    db.flush()
    return store_product


def update_store_product(
    db: Session,
    *,
    store_id: int,
    product_id: int,
    payload: schemas.StoreProductUpdate,
) -> models.StoreProduct:
    is_active = normalise_active_flag(payload.is_active)
    store_product = find_store_product(db, store_id=store_id, product_id=product_id)
    if not store_product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Store-product entry not found")
    store_product.min_quantity = payload.min_quantity
    store_product.max_quantity = payload.max_quantity
    store_product.is_active = is_active
    db.flush()
    return store_product


# ---------------------------------------------------------------------------
# INVENTORY RECORDS
# ---------------------------------------------------------------------------


def list_inventory(db: Session) -> List[models.Inventory]:
    return db.query(models.Inventory).order_by(models.Inventory.inventory_id.asc()).all()


def get_inventory_item(
    db: Session,
    *,
    inventory_id: int,
    store_id: Optional[int] = None,
) -> models.Inventory:
    query = db.query(models.Inventory).filter(models.Inventory.inventory_id == inventory_id)
    if store_id is not None:
        query = query.filter(models.Inventory.store_id == store_id)
    item = query.first()
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found")
    return item


def list_store_inventory(db: Session, *, store_id: int) -> List[models.Inventory]:
    items = (
        db.query(models.Inventory)
        .filter(models.Inventory.store_id == store_id)
        .order_by(models.Inventory.product_id.asc())
        .all()
    )
    if not items:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found")
    return items


def create_inventory(db: Session, *, payload: schemas.InventoryCreate) -> models.Inventory:
    existing = (
        db.query(models.Inventory)
        .filter(
            models.Inventory.store_id == payload.store_id,
            models.Inventory.product_id == payload.product_id,
        )
        .first()
    )
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Record already exists for product {payload.product_id} in store {payload.store_id}.",
        )
    _ensure_store_and_product(db, store_id=payload.store_id, product_id=payload.product_id)
    item = models.Inventory(
        store_id=payload.store_id,
        product_id=payload.product_id,
        current_quantity=payload.current_quantity,
        last_updated=datetime.now(timezone.utc),
    )
    db.add(item)
    db.flush()
    return item


def update_inventory(db: Session, *, inventory_id: int, payload: schemas.InventoryUpdate) -> models.Inventory:
    """Overwrite a count directly (stock take). Regular movements go through transactions."""
    item = db.query(models.Inventory).filter(models.Inventory.inventory_id == inventory_id).first()
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inventory not found")
    item.current_quantity = payload.current_quantity
    item.last_updated = datetime.now(timezone.utc)
    db.flush()
    return item


# ---------------------------------------------------------------------------
# PRODUCT TRANSACTIONS (read side)
# ---------------------------------------------------------------------------


def list_transactions(db: Session) -> List[models.ProductTransaction]:
    return (
        db.query(models.ProductTransaction)
        .order_by(
            models.ProductTransaction.timestamp.desc(),
            models.ProductTransaction.transaction_id.desc(),
        )
        .all()
    )


def get_transaction(db: Session, *, transaction_id: int) -> models.ProductTransaction:
    entry = (
        db.query(models.ProductTransaction)
        .filter(models.ProductTransaction.transaction_id == transaction_id)
        .first()
    )
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return entry


def parse_transaction_date(value: Optional[str]) -> date:
    if not value:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="date is required in headers (YYYY-MM-DD)",
        )
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="date must be formatted as YYYY-MM-DD",
        )


def list_transactions_on(db: Session, *, day: date) -> List[models.ProductTransaction]:
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1)
    return (
        db.query(models.ProductTransaction)
        .filter(
            models.ProductTransaction.timestamp >= start,
            models.ProductTransaction.timestamp < end,
        )
        .order_by(models.ProductTransaction.timestamp.asc())
        .all()
    )


def summarize_transactions(db: Session) -> schemas.TransactionSummary:
    counts = dict(
        db.query(models.ProductTransaction.movement_type, func.count(models.ProductTransaction.transaction_id))
        .group_by(models.ProductTransaction.movement_type)
        .all()
    )
    return schemas.TransactionSummary(
        stock_in_count=counts.get(models.MovementTypeEnum.STOCK_IN, 0),
        sell_count=counts.get(models.MovementTypeEnum.SELL, 0),
        remove_count=counts.get(models.MovementTypeEnum.REMOVE, 0),
    )
