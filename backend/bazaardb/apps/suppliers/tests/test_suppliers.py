from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from bazaardb.apps.catalog import models as catalog_models
from bazaardb.apps.stores import models as store_models
from bazaardb.apps.suppliers import router as suppliers_router
from bazaardb.apps.suppliers import schemas as supplier_schemas
from bazaardb.apps.suppliers import services as supplier_services


@pytest.fixture()
def supplier(db_session):
    db_session.add(store_models.Store(store_id=1, name="Depot", is_active="Y"))
    db_session.add(catalog_models.ProductCategory(category_id=1, name="Produce", is_active="Y"))
    db_session.flush()
    db_session.add(catalog_models.Product(product_id=1, name="Apples", category_id=1, is_active="Y"))
    db_session.commit()
    created = supplier_services.create_supplier(
        db_session,
        payload=supplier_schemas.SupplierCreate(supplier_id=7, name="Orchard Co", contact_info="orders@orchard.test"),
    )
    db_session.commit()
    return created


def test_supplier_crud(db_session, supplier):
    assert suppliers_router.get_supplier(supplier_id=7, db=db_session).contact_info == "orders@orchard.test"

    updated = suppliers_router.update_supplier(
        payload=supplier_schemas.SupplierUpdate(name="Orchard Ltd", contact_info=""),
        supplier_id=7,
        db=db_session,
    )
    assert updated.name == "Orchard Ltd"
    assert updated.contact_info is None

    with pytest.raises(HTTPException) as excinfo:
        supplier_services.create_supplier(
            db_session,
            payload=supplier_schemas.SupplierCreate(supplier_id=7, name="Another"),
        )
    assert excinfo.value.status_code == 409


def test_supplier_order_lifecycle(db_session, supplier):
    order = suppliers_router.create_supplier_order(
        payload=supplier_schemas.SupplierOrderCreate(
            supplier_id=7, store_id=1, product_id=1, quantity=40, price=Decimal("12.50")
        ),
        db=db_session,
    )
    assert order.order_id is not None

    updated = suppliers_router.update_supplier_order(
        payload=supplier_schemas.SupplierOrderCreate(
            supplier_id=7, store_id=1, product_id=1, quantity=60, price=Decimal("12.00")
        ),
        order_id=order.order_id,
        db=db_session,
    )
    assert updated.quantity == 60
    assert suppliers_router.get_supplier_order(order_id=order.order_id, db=db_session).quantity == 60

    with pytest.raises(HTTPException) as excinfo:
        suppliers_router.get_supplier_order(order_id=order.order_id + 1, db=db_session)
    assert excinfo.value.detail == "Supplier order not found"


def test_supplier_order_rejects_unknown_references(db_session, supplier):
    with pytest.raises(HTTPException) as excinfo:
        supplier_services.create_supplier_order(
            db_session,
            payload=supplier_schemas.SupplierOrderCreate(
                supplier_id=7, store_id=2, product_id=1, quantity=1, price=Decimal("1")
            ),
        )
    assert excinfo.value.detail == "Store not found"


def test_supplier_order_quantity_must_be_positive():
    with pytest.raises(ValidationError):
        supplier_schemas.SupplierOrderCreate(supplier_id=7, store_id=1, product_id=1, quantity=0, price=Decimal("1"))
