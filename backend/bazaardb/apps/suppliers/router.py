from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.orm import Session

from bazaardb.database import get_db
from bazaardb.security import get_current_principal
from bazaardb.utils.headers import require_header

from . import schemas, services

suppliers_router = APIRouter(
    prefix="/suppliers",
    tags=["suppliers"],
    dependencies=[Depends(get_current_principal)],
)

supplier_orders_router = APIRouter(
    prefix="/supplierOrderProducts",
    tags=["suppliers", "purchasing"],
    dependencies=[Depends(get_current_principal)],
)


@suppliers_router.get("", response_model=List[schemas.SupplierRead])
def list_suppliers(db: Session = Depends(get_db)):
    return services.list_suppliers(db)


@suppliers_router.get("/view", response_model=schemas.SupplierRead)
def get_supplier(
    supplier_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    return services.get_supplier(db, supplier_id=require_header(supplier_id, "supplier_id"))


@suppliers_router.post("", response_model=schemas.SupplierRead, status_code=status.HTTP_201_CREATED)
def create_supplier(payload: schemas.SupplierCreate, db: Session = Depends(get_db)):
    supplier = services.create_supplier(db, payload=payload)
    db.commit()
    db.refresh(supplier)
    return supplier


@suppliers_router.post("/update", response_model=schemas.SupplierRead)
def update_supplier(
    payload: schemas.SupplierUpdate,
    supplier_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    supplier = services.update_supplier(
        db,
        supplier_id=require_header(supplier_id, "supplier_id"),
        payload=payload,
    )
    db.commit()
    db.refresh(supplier)
    return supplier


@supplier_orders_router.get("", response_model=List[schemas.SupplierOrderRead])
def list_supplier_orders(db: Session = Depends(get_db)):
    return services.list_supplier_orders(db)


@supplier_orders_router.get("/view", response_model=schemas.SupplierOrderRead)
def get_supplier_order(
    order_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    return services.get_supplier_order(db, order_id=require_header(order_id, "order_id"))


@supplier_orders_router.post(
    "/supplier-orders",
    response_model=schemas.SupplierOrderRead,
    status_code=status.HTTP_201_CREATED,
)
def create_supplier_order(payload: schemas.SupplierOrderCreate, db: Session = Depends(get_db)):
    order = services.create_supplier_order(db, payload=payload)
    db.commit()
    db.refresh(order)
    return order


@supplier_orders_router.post("/update", response_model=schemas.SupplierOrderRead)
def update_supplier_order(
    payload: schemas.SupplierOrderCreate,
    order_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    order = services.update_supplier_order(
        db,
        order_id=require_header(order_id, "order_id"),
        payload=payload,
    )
    db.commit()
    db.refresh(order)
    return order
