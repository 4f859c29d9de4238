from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.orm import Session

from bazaardb.database import get_db
from bazaardb.security import get_current_principal
from bazaardb.utils.headers import require_header

from . import schemas, services

categories_router = APIRouter(
    prefix="/productCategories",
    tags=["catalog"],
    dependencies=[Depends(get_current_principal)],
)

products_router = APIRouter(
    prefix="/products",
    tags=["catalog"],
    dependencies=[Depends(get_current_principal)],
)


@categories_router.get("", response_model=List[schemas.ProductCategoryRead])
def list_categories(db: Session = Depends(get_db)):
    return services.list_categories(db)


@categories_router.get("/item", response_model=schemas.ProductCategoryRead)
def get_category(
    category_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    return services.get_category(db, category_id=require_header(category_id, "category_id"))


@categories_router.post(
    "",
    response_model=schemas.ProductCategoryRead,
    status_code=status.HTTP_201_CREATED,
)
def create_category(payload: schemas.ProductCategoryCreate, db: Session = Depends(get_db)):
    category = services.create_category(db, payload=payload)
    db.commit()
    db.refresh(category)
    return category


@categories_router.post("/update", response_model=schemas.ProductCategoryRead)
def update_category(
    payload: schemas.ProductCategoryUpdate,
    category_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    category = services.update_category(
        db,
        category_id=require_header(category_id, "category_id"),
        payload=payload,
    )
    db.commit()
    db.refresh(category)
    return category


@products_router.get("", response_model=List[schemas.ProductRead])
def list_products(db: Session = Depends(get_db)):
    return services.list_products(db)


@products_router.get("/item", response_model=schemas.ProductRead)
def get_product(
    product_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    return services.get_product(db, product_id=require_header(product_id, "product_id"))


@products_router.post("", response_model=schemas.ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(payload: schemas.ProductCreate, db: Session = Depends(get_db)):
    product = services.create_product(db, payload=payload)
    db.commit()
    db.refresh(product)
    return product


@products_router.post("/update", response_model=schemas.ProductRead)
def update_product(
    payload: schemas.ProductUpdate,
    product_id: Optional[int] = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
):
    product = services.update_product(
        db,
        product_id=require_header(product_id, "product_id"),
        payload=payload,
    )
    db.commit()
    db.refresh(product)
    return product
