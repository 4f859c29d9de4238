from __future__ import annotations

import pytest
from fastapi import HTTPException

from bazaardb.apps.catalog import router as catalog_router
from bazaardb.apps.catalog import schemas as catalog_schemas
from bazaardb.apps.catalog import services as catalog_services


@pytest.fixture()
def category(db_session):
    created = catalog_services.create_category(
        db_session,
        payload=catalog_schemas.ProductCategoryCreate(category_id=1, name="Beverages"),
    )
    db_session.commit()
    return created


def test_category_crud(db_session, category):
    assert catalog_router.get_category(category_id=1, db=db_session).name == "Beverages"

    updated = catalog_router.update_category(
        payload=catalog_schemas.ProductCategoryUpdate(name="Drinks"),
        category_id=1,
        db=db_session,
    )
    assert updated.name == "Drinks"

    with pytest.raises(HTTPException) as excinfo:
        catalog_services.create_category(
            db_session,
            payload=catalog_schemas.ProductCategoryCreate(category_id=2, name="Drinks"),
        )
    assert excinfo.value.status_code == 409


def test_product_requires_known_category(db_session, category):
    with pytest.raises(HTTPException) as excinfo:
        catalog_services.create_product(
            db_session,
            payload=catalog_schemas.ProductCreate(product_id=10, name="Cola", category_id=42),
        )
    assert excinfo.value.status_code == 404
    assert excinfo.value.detail == "Category not found"


def test_product_create_update_and_lookup(db_session, category):
    product = catalog_router.create_product(
        payload=catalog_schemas.ProductCreate(product_id=10, name="Cola", category_id=1),
        db=db_session,
    )
    assert product.is_active == "Y"
    assert product.updated_at is not None

    updated = catalog_router.update_product(
        payload=catalog_schemas.ProductUpdate(name="Cola Zero", category_id=1, is_active="N"),
        product_id=10,
        db=db_session,
    )
    assert (updated.name, updated.is_active) == ("Cola Zero", "N")

    assert [p.product_id for p in catalog_router.list_products(db=db_session)] == [10]

    with pytest.raises(HTTPException) as excinfo:
        catalog_router.get_product(product_id=None, db=db_session)
    assert excinfo.value.detail == "product_id is required in headers"

    with pytest.raises(HTTPException) as excinfo:
        catalog_router.get_product(product_id=11, db=db_session)
    assert excinfo.value.status_code == 404
