"""
Inventory ledger primitives.

Reads and writes against the inventory, store_products and
product_transactions tables. The mutating helpers never commit: they run
inside whatever unit of work the caller has open on `db`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session

from . import models
from .errors import InventoryNotFound


def _stock_with_policy(db: Session, *, store_id: int, product_id: int):
    return (
        db.query(
            models.Inventory.current_quantity,
            models.StoreProduct.min_quantity,
            models.StoreProduct.max_quantity,
        )
        .join(
            models.StoreProduct,
            and_(
                models.Inventory.store_id == models.StoreProduct.store_id,
                models.Inventory.product_id == models.StoreProduct.product_id,
            ),
        )
        .filter(
            models.Inventory.store_id == store_id,
            models.Inventory.product_id == product_id,
        )
        .first()
    )


def would_overstock(db: Session, *, store_id: int, product_id: int, incoming_quantity: int) -> bool:
    """True when receiving `incoming_quantity` would push stock above the policy max.

    Without both an inventory record and a policy row there is nothing to
    check against, so the movement is never blocked.
    """
    row = _stock_with_policy(db, store_id=store_id, product_id=product_id)
    if row is None:
        return False
    return row.current_quantity + incoming_quantity > row.max_quantity


def would_stockout(db: Session, *, store_id: int, product_id: int, outgoing_quantity: int) -> bool:
    """True when taking out `outgoing_quantity` would leave stock below the policy min."""
    row = _stock_with_policy(db, store_id=store_id, product_id=product_id)
    if row is None:
        return False
    return row.current_quantity - outgoing_quantity < row.min_quantity


def _on_hand_query(db: Session, *, store_id: int, product_id: int, for_update: bool = False):
    query = db.query(models.Inventory.current_quantity).filter(
        models.Inventory.store_id == store_id,
        models.Inventory.product_id == product_id,
    )
    if for_update:
        # SELECT ... FOR UPDATE; SQLite silently drops the clause.
        query = query.with_for_update()
    return query


def current_quantity(
    db: Session,
    *,
    store_id: int,
    product_id: int,
    for_update: bool = False,
) -> int:
    row = _on_hand_query(db, store_id=store_id, product_id=product_id, for_update=for_update).first()
    if row is None:
        raise InventoryNotFound()
    return row.current_quantity


def apply_delta(db: Session, *, store_id: int, product_id: int, delta: int) -> None:
    updated = (
        db.query(models.Inventory)
        .filter(
            models.Inventory.store_id == store_id,
            models.Inventory.product_id == product_id,
        )
        .update(
            {
                models.Inventory.current_quantity: models.Inventory.current_quantity + delta,
                models.Inventory.last_updated: datetime.now(timezone.utc),
            },
            synchronize_session="evaluate",
        )
    )
    # A movement must never be logged without its quantity adjustment.
    if updated == 0:
        raise InventoryNotFound()


def append_movement(
    db: Session,
    *,
    store_id: int,
    product_id: int,
    quantity: int,
    movement_type: models.MovementTypeEnum,
    updated_by: str,
    supplier_id: Optional[int],
) -> models.ProductTransaction:
    entry = models.ProductTransaction(
        store_id=store_id,
        product_id=product_id,
        quantity=quantity,
        movement_type=movement_type,
        updated_by=updated_by,
        supplier_id=supplier_id,
    )
    db.add(entry)
    db.flush()
    return entry
