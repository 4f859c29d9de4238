from __future__ import annotations

from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from bazaardb.apps.catalog import services as catalog_services
from bazaardb.apps.stores import services as store_services
from bazaardb.utils.flags import normalise_active_flag
from . import models, schemas


# ---------------------------------------------------------------------------
# SUPPLIERS
# ---------------------------------------------------------------------------


def list_suppliers(db: Session) -> List[models.Supplier]:
    return db.query(models.Supplier).order_by(models.Supplier.supplier_id.asc()).all()


def get_supplier(db: Session, *, supplier_id: int) -> models.Supplier:
    supplier = db.query(models.Supplier).filter(models.Supplier.supplier_id == supplier_id).first()
    if not supplier:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Supplier not found")
    return supplier


def create_supplier(db: Session, *, payload: schemas.SupplierCreate) -> models.Supplier:
    is_active = normalise_active_flag(payload.is_active)
    duplicate = (
        db.query(models.Supplier)
        .filter(
            (models.Supplier.supplier_id == payload.supplier_id)
            | (models.Supplier.name == payload.name)
        )
        .first()
    )
    if duplicate:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Supplier with this ID or name already exists",
        )
    supplier = models.Supplier(
        supplier_id=payload.supplier_id,
        name=payload.name,
        contact_info=payload.contact_info or None,
        is_active=is_active,
    )
    db.add(supplier)
    db.flush()
    return supplier


def update_supplier(db: Session, *, supplier_id: int, payload: schemas.SupplierUpdate) -> models.Supplier:
    is_active = normalise_active_flag(payload.is_active)
    supplier = get_supplier(db, supplier_id=supplier_id)
    supplier.name = payload.name
    supplier.contact_info = payload.contact_info or None
    supplier.is_active = is_active
    db.flush()
    return supplier


# ---------------------------------------------------------------------------
# SUPPLIER ORDERS
# ---------------------------------------------------------------------------


def _check_order_references(db: Session, payload: schemas.SupplierOrderCreate) -> None:
    get_supplier(db, supplier_id=payload.supplier_id)
    store_services.get_store(db, store_id=payload.store_id)
    catalog_services.get_product(db, product_id=payload.product_id)


def list_supplier_orders(db: Session) -> List[models.SupplierOrderProduct]:
    return (
        db.query(models.SupplierOrderProduct)
        .order_by(models.SupplierOrderProduct.order_id.desc())
        .all()
    )


def get_supplier_order(db: Session, *, order_id: int) -> models.SupplierOrderProduct:
    order = (
        db.query(models.SupplierOrderProduct)
        .filter(models.SupplierOrderProduct.order_id == order_id)
        .first()
    )
    if not order:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Supplier order not found")
    return order


def create_supplier_order(db: Session, *, payload: schemas.SupplierOrderCreate) -> models.SupplierOrderProduct:
    _check_order_references(db, payload)
    order = models.SupplierOrderProduct(
        supplier_id=payload.supplier_id,
        store_id=payload.store_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
        price=payload.price,
    )
    db.add(order)
    db.flush()
    return order


def update_supplier_order(
    db: Session,
    *,
    order_id: int,
    payload: schemas.SupplierOrderCreate,
) -> models.SupplierOrderProduct:
    order = get_supplier_order(db, order_id=order_id)
    _check_order_references(db, payload)
    order.supplier_id = payload.supplier_id
    order.store_id = payload.store_id
    order.product_id = payload.product_id
    order.quantity = payload.quantity
    order.price = payload.price
    db.flush()
    return order
