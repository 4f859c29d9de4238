from __future__ import annotations

import importlib

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from conftest import ALL_TABLES
from bazaardb.database import Base, get_db
from bazaardb.main import app


@pytest.fixture()
def client(tmp_path):
    # Requests run in a worker thread, so use a file database shared across connections.
    engine = create_engine(
        f"sqlite+pysqlite:///{tmp_path / 'api.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine, tables=ALL_TABLES)
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def _override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        engine.dispose()


@pytest.fixture()
def auth_headers(client):
    response = client.post("/auth/login", json={"username": "admin", "password": "password123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


def _seed(client, headers):
    steps = [
        ("/stores", {"store_id": 1, "name": "Harbour"}),
        ("/productCategories", {"category_id": 1, "name": "Dairy"}),
        ("/products", {"product_id": 1, "name": "Milk", "category_id": 1}),
        ("/suppliers", {"supplier_id": 1, "name": "Valley Dairy"}),
        ("/storeProducts", {"store_id": 1, "product_id": 1, "min_quantity": 2, "max_quantity": 10}),
        ("/inventory", {"store_id": 1, "product_id": 1, "current_quantity": 5}),
    ]
    for path, body in steps:
        response = client.post(path, json=body, headers=headers)
        assert response.status_code == 201, (path, response.text)


def test_health_is_public(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_data_routes_require_a_bearer_token(client):
    assert client.get("/stores").status_code == 401
    assert client.get("/stores", headers={"Authorization": "Bearer nope"}).status_code == 401


def test_movement_over_http(client, auth_headers):
    _seed(client, auth_headers)

    accepted = client.post(
        "/productTransactions",
        json={"store_id": 1, "product_id": 1, "quantity": 4, "updated_by": "clerk", "supplier_id": 1, "movement_type": "stock_in"},
        headers=auth_headers,
    )
    assert accepted.status_code == 200
    assert accepted.json() == {"message": "stock_in transaction processed successfully."}

    rejected = client.post(
        "/productTransactions",
        json={"store_id": 1, "product_id": 1, "quantity": 5, "updated_by": "clerk", "supplier_id": 1, "movement_type": "stock_in"},
        headers=auth_headers,
    )
    assert rejected.status_code == 400
    assert rejected.json() == {"error": "Overstocking would occur. Transaction aborted."}

    empty = client.post("/productTransactions", headers=auth_headers)
    assert empty.status_code == 400
    assert empty.json() == {"error": "Empty Data"}

    item = client.get("/inventory/item", headers={**auth_headers, "inventory_id": "1", "store_id": "1"})
    assert item.json()["current_quantity"] == 9

    summary = client.get("/productTransactions/transaction-summary", headers=auth_headers)
    assert summary.json() == [{"stock_in_count": 1, "sell_count": 0, "remove_count": 0}]


def test_single_row_routes_read_identifiers_from_headers(client, auth_headers):
    _seed(client, auth_headers)

    missing = client.get("/stores/store", headers=auth_headers)
    assert missing.status_code == 400
    assert missing.json() == {"detail": "store_id is required in headers"}

    found = client.get("/stores/store", headers={**auth_headers, "store_id": "1"})
    assert found.json()["name"] == "Harbour"


def test_malformed_movement_body_is_empty_data(client, auth_headers):
    _seed(client, auth_headers)

    response = client.post(
        "/productTransactions",
        json={"store_id": 1, "product_id": 1, "quantity": "lots", "updated_by": "clerk", "supplier_id": 1, "movement_type": "sell"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Empty Data"}


@pytest.mark.parametrize("app_name, attribute", [("auth", "auth_router"), ("stores", "stores_router"), ("pricing", "pricing_router")])
def test_app_packages_keep_router_module_reachable(app_name, attribute):
    package = importlib.import_module(f"bazaardb.apps.{app_name}")

    assert isinstance(getattr(package, attribute), APIRouter)
    assert package.router is importlib.import_module(f"bazaardb.apps.{app_name}.router")
