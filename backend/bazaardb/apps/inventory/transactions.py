"""
Movement transaction coordinator.

Turns one stock movement request into either:
- exactly one product_transactions row plus the matching inventory
  adjustment, committed together, or
- a typed rejection with nothing persisted.

`stock_in` and `sell` rely on transaction isolation alone for their
check-then-act against the policy join. `remove` reads the inventory row
FOR UPDATE so concurrent removals cannot both pass the quantity check.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from pydantic import ValidationError
from sqlalchemy.orm import Session

from bazaardb.database import atomic

from . import ledger, models, schemas
from .errors import (
    InsufficientQuantity,
    InvalidRequest,
    MovementRejected,
    OverstockRejected,
    StockoutRejected,
    TransactionFailed,
    UnsupportedMovementType,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "store_id",
    "product_id",
    "quantity",
    "updated_by",
    "supplier_id",
    "movement_type",
)


def parse_request(body: Any) -> schemas.ProductTransactionCreate:
    """Turn a raw JSON body into a movement request.

    A body that is not an object, or whose fields have the wrong type, is
    treated the same as an empty one.
    """
    if body is None:
        return schemas.ProductTransactionCreate()
    if isinstance(body, schemas.ProductTransactionCreate):
        return body
    try:
        return schemas.ProductTransactionCreate.model_validate(body)
    except ValidationError:
        raise InvalidRequest()


def _validate_request(payload: schemas.ProductTransactionCreate) -> None:
    # Absent, null, empty and zero all count as missing.
    if any(not getattr(payload, field) for field in REQUIRED_FIELDS):
        raise InvalidRequest()
    if payload.quantity < 0:
        raise InvalidRequest("quantity must be a positive number")


def _parse_movement_type(value: str) -> models.MovementTypeEnum:
    try:
        return models.MovementTypeEnum(value)
    except ValueError:
        raise UnsupportedMovementType()


def _record(
    db: Session,
    payload: schemas.ProductTransactionCreate,
    movement_type: models.MovementTypeEnum,
    delta: int,
) -> models.ProductTransaction:
    entry = ledger.append_movement(
        db,
        store_id=payload.store_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
        movement_type=movement_type,
        updated_by=payload.updated_by,
        supplier_id=payload.supplier_id,
    )
    ledger.apply_delta(db, store_id=payload.store_id, product_id=payload.product_id, delta=delta)
    return entry


def _stock_in(db: Session, payload: schemas.ProductTransactionCreate) -> models.ProductTransaction:
    if ledger.would_overstock(
        db,
        store_id=payload.store_id,
        product_id=payload.product_id,
        incoming_quantity=payload.quantity,
    ):
        raise OverstockRejected()
    return _record(db, payload, models.MovementTypeEnum.STOCK_IN, payload.quantity)


def _sell(db: Session, payload: schemas.ProductTransactionCreate) -> models.ProductTransaction:
    if ledger.would_stockout(
        db,
        store_id=payload.store_id,
        product_id=payload.product_id,
        outgoing_quantity=payload.quantity,
    ):
        raise StockoutRejected()
    return _record(db, payload, models.MovementTypeEnum.SELL, -payload.quantity)


def _remove(db: Session, payload: schemas.ProductTransactionCreate) -> models.ProductTransaction:
    on_hand = ledger.current_quantity(
        db,
        store_id=payload.store_id,
        product_id=payload.product_id,
        for_update=True,
    )
    if payload.quantity > on_hand:
        raise InsufficientQuantity()
    return _record(db, payload, models.MovementTypeEnum.REMOVE, -payload.quantity)


MOVEMENT_HANDLERS: Dict[
    models.MovementTypeEnum,
    Callable[[Session, schemas.ProductTransactionCreate], models.ProductTransaction],
] = {
    models.MovementTypeEnum.STOCK_IN: _stock_in,
    models.MovementTypeEnum.SELL: _sell,
    models.MovementTypeEnum.REMOVE: _remove,
}


def process_movement(db: Session, *, payload: schemas.ProductTransactionCreate) -> str:
    """
    Validate and apply one stock movement.

    Returns the confirmation message on success. Raises a `MovementRejected`
    subclass otherwise; by then the unit of work has been rolled back.
    """
    _validate_request(payload)
    context = {
        "store_id": payload.store_id,
        "product_id": payload.product_id,
        "movement_type": payload.movement_type,
        "quantity": payload.quantity,
    }

    try:
        with atomic(db):
            movement_type = _parse_movement_type(payload.movement_type)
            entry = MOVEMENT_HANDLERS[movement_type](db, payload)
            transaction_id = entry.transaction_id
    except MovementRejected as exc:
        logger.info("Product transaction rejected", extra={**context, "rejection": exc.kind})
        raise
    except Exception as exc:
        logger.exception("Transaction failed", extra=context)
        raise TransactionFailed() from exc

    logger.info("Product transaction recorded", extra={**context, "transaction_id": transaction_id})
    return f"{movement_type.value} transaction processed successfully."
