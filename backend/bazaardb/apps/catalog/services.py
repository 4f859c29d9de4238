from __future__ import annotations

from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from bazaardb.utils.flags import normalise_active_flag
from . import models, schemas


# ---------------------------------------------------------------------------
# CATEGORIES
# ---------------------------------------------------------------------------


def list_categories(db: Session) -> List[models.ProductCategory]:
    return db.query(models.ProductCategory).order_by(models.ProductCategory.category_id.asc()).all()


def get_category(db: Session, *, category_id: int) -> models.ProductCategory:
    category = (
        db.query(models.ProductCategory)
        .filter(models.ProductCategory.category_id == category_id)
        .first()
    )
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


def create_category(db: Session, *, payload: schemas.ProductCategoryCreate) -> models.ProductCategory:
    is_active = normalise_active_flag(payload.is_active)
    duplicate = (
        db.query(models.ProductCategory)
        .filter(
            (models.ProductCategory.category_id == payload.category_id)
            | (models.ProductCategory.name == payload.name)
        )
        .first()
    )
    if duplicate:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Category with this ID or name already exists",
        )
    category = models.ProductCategory(
        category_id=payload.category_id,
        name=payload.name,
        is_active=is_active,
    )
    db.add(category)
    db.flush()
    return category


def update_category(
    db: Session,
    *,
    category_id: int,
    payload: schemas.ProductCategoryUpdate,
) -> models.ProductCategory:
    is_active = normalise_active_flag(payload.is_active)
    category = get_category(db, category_id=category_id)
    category.name = payload.name
    category.is_active = is_active
    db.flush()
    return category


# ---------------------------------------------------------------------------
# PRODUCTS
# ---------------------------------------------------------------------------


def list_products(db: Session) -> List[models.Product]:
    return db.query(models.Product).order_by(models.Product.product_id.asc()).all()


def get_product(db: Session, *, product_id: int) -> models.Product:
    product = db.query(models.Product).filter(models.Product.product_id == product_id).first()
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


def create_product(db: Session, *, payload: schemas.ProductCreate) -> models.Product:
    is_active = normalise_active_flag(payload.is_active)
    duplicate = (
        db.query(models.Product)
        .filter((models.Product.product_id == payload.product_id) | (models.Product.name == payload.name))
        .first()
    )
    if duplicate:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Product with this name or ID already exists",
        )
    get_category(db, category_id=payload.category_id)
    product = models.Product(
        product_id=payload.product_id,
        name=payload.name,
        category_id=payload.category_id,
        is_active=is_active,
    )
    db.add(product)
    db.flush()
    return product


def update_product(db: Session, *, product_id: int, payload: schemas.ProductUpdate) -> models.Product:
    is_active = normalise_active_flag(payload.is_active)
    product = get_product(db, product_id=product_id)
    if product.category_id != payload.category_id:
        get_category(db, category_id=payload.category_id)
    product.name = payload.name
    product.category_id = payload.category_id
    product.is_active = is_active
    db.flush()
    return product
