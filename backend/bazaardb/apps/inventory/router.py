from __future__ import annotations

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Header, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from bazaardb.database import get_db
from bazaardb.security import get_current_principal
from bazaardb.utils.headers import require_header

from . import schemas, services, transactions
from .errors import MovementRejected

inventory_router = APIRouter(
    prefix="/inventory",
    tags=["inventory"],
    dependencies=[Depends(get_current_principal)],
)

store_products_router = APIRouter(
    prefix="/storeProducts",
    tags=["inventory"],
    dependencies=[Depends(get_current_principal)],
)

product_transactions_router = APIRouter(
    prefix="/productTransactions",
    tags=["inventory", "transactions"],
    dependencies=[Depends(get_current_principal)],
)


# ---------------------------------------------------------------------------
# INVENTORY
# ---------------------------------------------------------------------------


@inventory_router.get("", response_model=List[schemas.InventoryRead])
def list_inventory(db: Session = Depends(get_db)):
    return services.list_inventory(db)


@inventory_router.get("/item", response_model=schemas.InventoryRead)
def get_inventory_item(
    inventory_id: Optional[int] = Header(None, convert_underscores=False),
    store_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    return services.get_inventory_item(
        db,
        inventory_id=require_header(inventory_id, "inventory_id"),
        store_id=store_id,
    )


@inventory_router.get("/status", response_model=List[schemas.InventoryRead])
def store_inventory_status(
    store_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    return services.list_store_inventory(db, store_id=require_header(store_id, "store_id"))


@inventory_router.post("", response_model=schemas.InventoryRead, status_code=status.HTTP_201_CREATED)
def create_inventory(payload: schemas.InventoryCreate, db: Session = Depends(get_db)):
    item = services.create_inventory(db, payload=payload)
    db.commit()
    db.refresh(item)
    return item


@inventory_router.post("/update", response_model=schemas.InventoryRead)
def update_inventory(
    payload: schemas.InventoryUpdate,
    inventory_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    item = services.update_inventory(
        db,
        inventory_id=require_header(inventory_id, "inventory_id"),
        payload=payload,
    )
    db.commit()
    db.refresh(item)
    return item


# ---------------------------------------------------------------------------
# STORE PRODUCTS
# ---------------------------------------------------------------------------


@store_products_router.get("", response_model=List[schemas.StoreProductRead])
def list_store_products(db: Session = Depends(get_db)):
    return services.list_store_products(db)


@store_products_router.get("/product", response_model=schemas.StoreProductRead)
def get_store_product(
    store_id: Optional[int] = Header(None, convert_underscores=False),
    product_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    return services.get_store_product(
        db,
        store_id=require_header(store_id, "store_id"),
        product_id=require_header(product_id, "product_id"),
    )


@store_products_router.post(
    "",
    response_model=schemas.StoreProductRead,
    status_code=status.HTTP_201_CREATED,
)
def create_store_product(payload: schemas.StoreProductCreate, db: Session = Depends(get_db)):
    store_product = services.create_store_product(db, payload=payload)
    db.commit()
    db.refresh(store_product)
    return store_product


@store_products_router.post("/update", response_model=schemas.StoreProductRead)
def update_store_product(
    payload: schemas.StoreProductUpdate,
    store_id: Optional[int] = Header(None, convert_underscores=False),
    product_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    # product_id may come from the header or the body
    if product_id is None:
        product_id = payload.product_id
    store_product = services.update_store_product(
        db,
        store_id=require_header(store_id, "store_id"),
        product_id=require_header(product_id, "product_id"),
        payload=payload,
    )
    db.commit()
    db.refresh(store_product)
    return store_product


# ---------------------------------------------------------------------------
# PRODUCT TRANSACTIONS
# ---------------------------------------------------------------------------


@product_transactions_router.get("", response_model=List[schemas.ProductTransactionRead])
def list_transactions(db: Session = Depends(get_db)):
    return services.list_transactions(db)


@product_transactions_router.get("/transaction", response_model=schemas.ProductTransactionRead)
def get_transaction(
    transaction_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    return services.get_transaction(db, transaction_id=require_header(transaction_id, "transaction_id"))


@product_transactions_router.get("/by-date", response_model=List[schemas.ProductTransactionRead])
def list_transactions_by_date(
    date: Optional[str] = Header(None),
    db: Session = Depends(get_db),
):
    return services.list_transactions_on(db, day=services.parse_transaction_date(date))


@product_transactions_router.get("/transaction-summary", response_model=List[schemas.TransactionSummary])
def transaction_summary(db: Session = Depends(get_db)):
    return [services.summarize_transactions(db)]


@product_transactions_router.post(
    "",
    response_model=schemas.ProductTransactionResult,
    responses={
        400: {"description": "Missing data, unknown movement_type or a stocking rule was violated"},
        404: {"description": "No inventory record for the store/product"},
        500: {"description": "Storage fault; nothing was written"},
    },
)
def create_transaction(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    try:
        message = transactions.process_movement(
            db,
            payload=transactions.parse_request(payload),
        )
    except MovementRejected as exc:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    return schemas.ProductTransactionResult(message=message)
